import logging
import os


class JournalLogger:
    """Custom logger for the journal bot"""

    def __init__(self):
        self.logger = logging.getLogger('journal_bot')
        self.formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        self.setup_logger()

    def setup_logger(self):
        """Setup console logging with the default level"""
        self.logger.setLevel(logging.INFO)

        if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
                   for h in self.logger.handlers):
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(self.formatter)
            self.logger.addHandler(console_handler)

    def configure(self, level: str = 'INFO', log_file: str = None):
        """Apply the configured level and attach the file handler"""
        resolved = getattr(logging, level.upper(), logging.INFO)
        self.logger.setLevel(resolved)

        for handler in self.logger.handlers:
            handler.setLevel(resolved)

        if log_file and not any(isinstance(h, logging.FileHandler) for h in self.logger.handlers):
            # Create logs directory if it doesn't exist
            directory = os.path.dirname(log_file)
            if directory:
                os.makedirs(directory, exist_ok=True)

            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(self.formatter)
            file_handler.setLevel(resolved)
            self.logger.addHandler(file_handler)

    def info(self, message, client_id=None):
        """Log info message"""
        if client_id:
            message = f"[Client:{client_id}] {message}"
        self.logger.info(message)

    def error(self, message, client_id=None, error=None):
        """Log error message"""
        if client_id:
            message = f"[Client:{client_id}] {message}"
        if error:
            message = f"{message} - Error: {str(error)}"
        self.logger.error(message)

    def warning(self, message, client_id=None):
        """Log warning message"""
        if client_id:
            message = f"[Client:{client_id}] {message}"
        self.logger.warning(message)

    def debug(self, message, client_id=None):
        """Log debug message"""
        if client_id:
            message = f"[Client:{client_id}] {message}"
        self.logger.debug(message)

    def log_user_interaction(self, client_id, action, details=None):
        """Log user interactions"""
        message = f"User interaction - Action: {action}"
        if details:
            message += f" - Details: {details}"
        self.info(message, client_id)

    def log_ai_request(self, client_id, model, tokens_used=None):
        """Log chat service requests"""
        message = f"AI Request - Model: {model}"
        if tokens_used:
            message += f" - Tokens: {tokens_used}"
        self.info(message, client_id)

    def log_storage_operation(self, operation, record, client_id=None):
        """Log client state store operations"""
        message = f"Storage Operation - {operation} on {record}"
        self.debug(message, client_id)

# Global logger instance
logger = JournalLogger()
