import asyncio
import random
import signal
from typing import Optional

from telegram import Update
from telegram.constants import ChatAction
from telegram.error import TelegramError
from telegram.ext import Application, CommandHandler, ContextTypes, MessageHandler, filters

from ai_services.geolocation import GeoLocator, format_crisis_resources
from ai_services.journal_manager import JournalManager
from ai_services.openrouter_client import OpenRouterClient
from ai_services.profile_updater import ProfileUpdater
from ai_services.resource_selector import ResourceSelector, format_resource_for_message
from ai_services.session_tracker import SessionTracker
from ai_services.text_analyzer import TextAnalyzer
from config import Config
from database.models import TimeRange
from database.mongodb import ClientStateStore
from graph.journal_graph import JournalGraph
from utils.logger import logger

ERROR_MESSAGE = "Sorry, something went wrong on my side. Please try again in a moment."
BUSY_MESSAGE = "Give me a moment, I'm still thinking about your last entry..."
LOCATION_NOTE = (
    "These contacts are based on the server's location, not yours. "
    "Send /resources followed by your country code (for example /resources GB) to see local services."
)

HELP_MESSAGE = (
    "AI Therapy Journal\n\n"
    "Commands:\n"
    "/start - begin or resume your journal\n"
    "/prompt - get a journaling question\n"
    "/mood [week|month|all] - summary of your mood history\n"
    "/profile - what I've learned about how you communicate\n"
    "/resources [country code] - crisis support contacts\n"
    "/clear - start a fresh conversation (mood history is kept)\n"
    "/help - show this message\n\n"
    "Just write to me like you would in a journal. "
    "I'm an AI assistant and not a replacement for professional care. "
    "If you are in danger, please contact your local emergency services."
)


class JournalBot:
    """Telegram front end for the journal assistant"""

    def __init__(self, config: Config, store: Optional[ClientStateStore] = None,
                 geolocator: Optional[GeoLocator] = None):
        self.config = config
        self.app = None
        self.is_running = False

        rng = random.Random(config.random_seed)
        self.store = store or ClientStateStore(config)
        self.chat_client = OpenRouterClient(config)
        self.tracker = SessionTracker(
            analyzer=TextAnalyzer(rng=rng),
            profile_updater=ProfileUpdater(),
            rng=rng
        )
        self.geolocator = geolocator or GeoLocator(config)
        self.journal = JournalManager(
            config,
            store=self.store,
            graph=JournalGraph(self.tracker, self.chat_client),
            tracker=self.tracker,
            resource_selector=ResourceSelector(config, rng)
        )

    async def initialize(self):
        """Initialize the bot"""
        try:
            self.config.check_required()

            self.app = Application.builder().token(self.config.telegram_bot_token).build()

            self.app.add_handler(CommandHandler("start", self.start_command))
            self.app.add_handler(CommandHandler("help", self.help_command))
            self.app.add_handler(CommandHandler("clear", self.clear_command))
            self.app.add_handler(CommandHandler("mood", self.mood_command))
            self.app.add_handler(CommandHandler("prompt", self.prompt_command))
            self.app.add_handler(CommandHandler("profile", self.profile_command))
            self.app.add_handler(CommandHandler("resources", self.resources_command))
            self.app.add_handler(MessageHandler(filters.UpdateType.MESSAGE & filters.TEXT & ~filters.COMMAND, self.handle_message))

            self.app.add_error_handler(self.error_handler)

            logger.info("Bot initialized successfully")

        except Exception as e:
            logger.error("Failed to initialize bot", error=e)
            raise

    async def start_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /start command"""
        client_id = str(update.effective_user.id)

        try:
            logger.log_user_interaction(client_id, "START_COMMAND")

            await context.bot.send_chat_action(chat_id=update.effective_chat.id, action=ChatAction.TYPING)
            greeting = await self.journal.ensure_greeting(client_id)
            if greeting:
                await update.message.reply_text(greeting)
            else:
                await update.message.reply_text(
                    f"Welcome back, {update.effective_user.first_name}. How are you feeling today?"
                )

        except Exception as e:
            logger.error("Error in start command", client_id, e)
            await update.message.reply_text(ERROR_MESSAGE)

    async def help_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /help command"""
        client_id = str(update.effective_user.id)
        logger.log_user_interaction(client_id, "HELP_COMMAND")
        await update.message.reply_text(HELP_MESSAGE)

    async def clear_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /clear command"""
        client_id = str(update.effective_user.id)

        try:
            logger.log_user_interaction(client_id, "CLEAR_COMMAND")
            greeting = await self.journal.clear_conversation(client_id)
            await update.message.reply_text("Your conversation has been cleared. Your mood history is kept.")
            if greeting:
                await update.message.reply_text(greeting)

        except Exception as e:
            logger.error("Error in clear command", client_id, e)
            await update.message.reply_text(ERROR_MESSAGE)

    async def mood_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /mood [week|month|all]"""
        client_id = str(update.effective_user.id)

        try:
            logger.log_user_interaction(client_id, "MOOD_COMMAND")
            time_range = TimeRange.WEEK
            if context.args:
                try:
                    time_range = TimeRange(context.args[0].lower())
                except ValueError:
                    await update.message.reply_text("Usage: /mood [week|month|all]")
                    return

            summary = await self.journal.get_mood_summary(client_id, time_range)
            await update.message.reply_text(summary)

        except Exception as e:
            logger.error("Error in mood command", client_id, e)
            await update.message.reply_text(ERROR_MESSAGE)

    async def prompt_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /prompt command"""
        client_id = str(update.effective_user.id)

        try:
            logger.log_user_interaction(client_id, "PROMPT_COMMAND")
            question = await self.journal.next_prompt(client_id)
            await update.message.reply_text(question)

        except Exception as e:
            logger.error("Error in prompt command", client_id, e)
            await update.message.reply_text(ERROR_MESSAGE)

    async def profile_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /profile command"""
        client_id = str(update.effective_user.id)

        try:
            logger.log_user_interaction(client_id, "PROFILE_COMMAND")
            summary = await self.journal.get_profile_summary(client_id)
            await update.message.reply_text(summary)

        except Exception as e:
            logger.error("Error in profile command", client_id, e)
            await update.message.reply_text(ERROR_MESSAGE)

    async def resources_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /resources [country code]"""
        client_id = str(update.effective_user.id)

        try:
            logger.log_user_interaction(client_id, "RESOURCES_COMMAND")
            country_code = context.args[0] if context.args else None
            await update.message.reply_text(await self._crisis_contacts(country_code))

        except Exception as e:
            logger.error("Error in resources command", client_id, e)
            await update.message.reply_text(ERROR_MESSAGE)

    async def handle_message(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle journal entries"""
        client_id = str(update.effective_user.id)
        message = update.effective_message
        if message is None or not message.text:
            return
        message_text = message.text

        try:
            logger.log_user_interaction(client_id, "MESSAGE", message_text[:100])

            # One turn at a time per client
            if self.journal.has_pending_turn(client_id):
                await message.reply_text(BUSY_MESSAGE)
                return

            await context.bot.send_chat_action(chat_id=update.effective_chat.id, action=ChatAction.TYPING)

            reply = await self.journal.add_user_message(client_id, message_text)
            if reply is None:
                return

            await message.reply_text(reply.text)

            if reply.crisis_phrase:
                await message.reply_text(await self._crisis_contacts())

            if reply.resource:
                await message.reply_text(format_resource_for_message(reply.resource))

            logger.info("Response sent", client_id)

        except Exception as e:
            logger.error("Error handling message", client_id, e)
            await message.reply_text(ERROR_MESSAGE)

    async def _crisis_contacts(self, country_code: Optional[str] = None) -> str:
        """Hotline text for a code, or for the host lookup with a note saying so"""
        resources = await self.geolocator.get_crisis_resources(country_code)
        text = format_crisis_resources(resources)
        if not country_code:
            text = f"{text}\n\n{LOCATION_NOTE}"
        return text

    async def error_handler(self, update: object, context: ContextTypes.DEFAULT_TYPE):
        """Handle telegram errors"""
        client_id = None
        if isinstance(update, Update) and update.effective_user:
            client_id = str(update.effective_user.id)

        logger.error("Telegram error occurred", client_id, context.error)

        if isinstance(update, Update) and update.message:
            try:
                await update.message.reply_text(ERROR_MESSAGE)
            except TelegramError as e:
                logger.error("Could not deliver error message", client_id, e)

    async def start_polling(self):
        """Start the bot with polling"""
        try:
            self.is_running = True
            logger.info("Starting bot with polling...")

            await self.app.initialize()
            await self.app.start()
            await self.app.updater.start_polling(drop_pending_updates=True)

            while self.is_running:
                await asyncio.sleep(1)

        except Exception as e:
            logger.error("Error during polling", error=e)
            raise
        finally:
            await self.stop_polling()

    async def stop_polling(self):
        """Stop the bot polling"""
        try:
            self.is_running = False
            if self.app and self.app.running:
                await self.app.updater.stop()
                await self.app.stop()
                await self.app.shutdown()
        except Exception as e:
            logger.error("Error stopping polling", error=e)

    async def shutdown(self):
        """Shutdown the bot gracefully"""
        try:
            logger.info("Shutting down bot...")

            await self.journal.cancel_all()
            await self.stop_polling()

            self.chat_client.close()
            self.store.close()

            logger.info("Bot shutdown completed")

        except Exception as e:
            logger.error("Error during shutdown", error=e)


async def main():
    """Main function"""
    config = Config.from_env()
    logger.configure(config.log_level, config.log_file)

    bot = JournalBot(config)

    def request_stop(signum, frame):
        logger.info(f"Received signal {signum}. Shutting down gracefully...")
        bot.is_running = False

    signal.signal(signal.SIGINT, request_stop)
    signal.signal(signal.SIGTERM, request_stop)

    try:
        await bot.initialize()
        await bot.start_polling()

    except Exception as e:
        logger.error("Fatal error", error=e)
        raise
    finally:
        await bot.shutdown()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Bot stopped by user")
