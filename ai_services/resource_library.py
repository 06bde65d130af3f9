"""Static content for resource cards and crisis contacts."""
from database.models import CrisisContact, CrisisResources

QUOTES = [
    {"content": "You don't have to control your thoughts. You just have to stop letting them control you.", "source": "Dan Millman"},
    {"content": "You are not your illness. You have an individual story to tell. You have a name, a history, a personality. Staying yourself is part of the battle.", "source": "Julian Seifter"},
    {"content": "There is hope, even when your brain tells you there isn't.", "source": "John Green"},
    {"content": "Promise me you'll always remember: You're braver than you believe, stronger than you seem, and smarter than you think.", "source": "A.A. Milne"},
    {"content": "You are not a drop in the ocean. You are the entire ocean in a drop.", "source": "Rumi"},
    {"content": "The greatest glory in living lies not in never falling, but in rising every time we fall.", "source": "Nelson Mandela"},
    {"content": "Your present circumstances don't determine where you can go; they merely determine where you start.", "source": "Nido Qubein"},
    {"content": "Nothing is impossible. The word itself says 'I'm possible!'", "source": "Audrey Hepburn"},
    {"content": "In the middle of difficulty lies opportunity.", "source": "Albert Einstein"},
    {"content": "Self-care is not self-indulgence, it is self-preservation.", "source": "Audre Lorde"},
    {"content": "You are allowed to take up space. You are allowed to have a voice. You are allowed to tell people how you feel.", "source": "Megan Jayne Crabbe"},
    {"content": "The way I see it, if you want the rainbow, you gotta put up with the rain.", "source": "Dolly Parton"},
    {"content": "Sometimes the bravest and most important thing you can do is just show up.", "source": "Brené Brown"},
    {"content": "What mental health needs is more sunlight, more candor, and more unashamed conversation.", "source": "Glenn Close"},
    {"content": "Happiness can be found even in the darkest of times, if one only remembers to turn on the light.", "source": "J.K. Rowling"},
]

BREATHING_EXERCISES = [
    {
        "title": "4-7-8 Breathing",
        "content": "Find a comfortable position. Inhale quietly through your nose for 4 seconds. Hold your breath for 7 seconds. Exhale completely through your mouth for 8 seconds, making a whoosh sound. Repeat this cycle 4 times."
    },
    {
        "title": "Box Breathing",
        "content": "Inhale slowly through your nose for 4 seconds. Hold your breath for 4 seconds. Exhale through your mouth for 4 seconds. Hold your breath for 4 seconds. Repeat this square pattern for 1-2 minutes."
    },
    {
        "title": "Diaphragmatic Breathing",
        "content": "Place one hand on your chest and the other on your abdomen. Breathe in slowly through your nose, feeling your abdomen expand (not your chest). Exhale slowly through pursed lips. Focus on the movement of your abdomen rather than your chest."
    },
    {
        "title": "Alternate Nostril Breathing",
        "content": "Use your right thumb to close your right nostril. Inhale deeply through your left nostril. Close your left nostril with your ring finger, release your thumb, and exhale through your right nostril. Inhale through your right nostril, then close it, and exhale through your left. Repeat for 5-10 cycles."
    },
    {
        "title": "Calming Breath",
        "content": "Breathe in through your nose for 3 seconds. Breathe out through your mouth for 6 seconds (twice as long as the inhale). Focus on making your exhale slow and controlled. Continue for 2-3 minutes."
    },
]

MINDFULNESS_PRACTICES = [
    {
        "title": "Body Scan",
        "content": "Find a comfortable position sitting or lying down. Close your eyes and bring awareness to your body. Starting from your toes and moving upward, notice any sensations, tension, or discomfort in each part of your body. Don't try to change anything, simply observe with curiosity and without judgment."
    },
    {
        "title": "Five Senses Grounding",
        "content": "Take a moment to notice: 5 things you can see, 4 things you can touch, 3 things you can hear, 2 things you can smell, and 1 thing you can taste. This exercise helps bring you back to the present moment when feeling overwhelmed."
    },
    {
        "title": "Mindful Walking",
        "content": "Take a slow, deliberate walk. Pay attention to the sensation of your feet touching the ground, the movement of your legs, and your breathing. Notice the environment around you (colors, sounds, smells) without getting caught up in thoughts about them."
    },
    {
        "title": "Loving-Kindness Meditation",
        "content": "Close your eyes and bring to mind someone you care about. Silently repeat: 'May you be happy. May you be healthy. May you be safe. May you live with ease.' Then direct these wishes toward yourself, and gradually extend them to others, including those you find difficult."
    },
    {
        "title": "Mindful Eating",
        "content": "Choose a small piece of food (like a raisin or piece of chocolate). Examine it as if you've never seen it before. Notice its color, texture, and smell. Place it in your mouth without chewing, noticing the sensations. Slowly chew, fully experiencing the taste and texture."
    },
    {
        "title": "Thought Clouds",
        "content": "Imagine your thoughts as clouds passing across the sky of your mind. Don't try to push them away or hold onto them, simply observe them forming and dissolving. Notice the space between thoughts, the clear blue sky that's always present."
    },
]

COPING_STRATEGIES = {
    "anxiety": [
        {
            "title": "Progressive Muscle Relaxation",
            "content": "Tense and then release each muscle group in your body, starting from your toes and working up to your head. Hold the tension for 5 seconds, then release for 10 seconds, noticing the difference between tension and relaxation."
        },
        {
            "title": "Worry Time",
            "content": "Schedule a specific 15-30 minute period each day as your 'worry time.' When worries arise outside this time, note them down and postpone thinking about them until your designated worry time. This helps contain anxiety to a specific timeframe."
        },
        {
            "title": "Grounding Techniques",
            "content": "When anxiety spikes, focus on concrete details in your environment. Name 5 blue things you can see, 4 textures you can feel, 3 sounds you can hear, 2 things you can smell, and 1 thing you can taste."
        },
    ],
    "depression": [
        {
            "title": "Behavioral Activation",
            "content": "Make a list of activities that typically bring you joy or satisfaction. Choose one small activity each day and complete it, even when motivation is low. Notice any positive feelings, however small, that result from taking action."
        },
        {
            "title": "Gratitude Practice",
            "content": "Each evening, write down three specific things you're grateful for from that day. They can be as simple as 'the warm sunshine' or 'the taste of my morning coffee.' This helps shift attention toward positive aspects of life."
        },
        {
            "title": "Movement for Mood",
            "content": "Commit to just 5 minutes of physical movement. Walk around your home, stretch, or dance to one song. Movement releases endorphins that can help lift your mood, even when done in small amounts."
        },
    ],
    "anger": [
        {
            "title": "Timeout Technique",
            "content": "When you notice anger rising, give yourself permission to take a timeout. Remove yourself from the triggering situation for at least 20 minutes (the time it takes for stress hormones to dissipate) before responding."
        },
        {
            "title": "Physical Release",
            "content": "Channel the physical energy of anger into a constructive activity: go for a run, punch a pillow, tear up paper, or squeeze a stress ball. This helps discharge the bodily tension that accompanies anger."
        },
        {
            "title": "Anger Journaling",
            "content": "Write uncensored thoughts about what's making you angry. Include what happened, your thoughts about it, and the emotions underneath your anger (often hurt, fear, or disappointment). This helps process anger rather than acting on it impulsively."
        },
    ],
    "grief": [
        {
            "title": "Memory Box",
            "content": "Create a special container to hold meaningful items connected to your loss. Include photos, letters, or objects that hold significance. This provides a tangible way to honor your connection while containing grief in a designated space."
        },
        {
            "title": "Grief Journaling",
            "content": "Write letters to the person or thing you've lost. Share your feelings, things you wish you'd said, or updates about your life. This maintains a sense of connection while acknowledging the reality of the loss."
        },
        {
            "title": "Grief Rituals",
            "content": "Create a simple ritual to honor your loss: light a candle, visit a meaningful place, play a special song, or cook a favorite meal. Rituals provide structure for expressing grief and commemorating what matters to you."
        },
    ],
    "neutral": [
        {
            "title": "Values Reflection",
            "content": "Take time to identify your core values, what matters most to you in life. Then reflect on one small action you could take today that aligns with these values. This builds a sense of meaning and purpose in everyday choices."
        },
        {
            "title": "Mindful Moments",
            "content": "Set reminders to take three mindful breaths throughout your day. During these brief pauses, simply notice your breath and bodily sensations, allowing yourself to fully arrive in the present moment before continuing your activities."
        },
        {
            "title": "Strength Inventory",
            "content": "Make a list of your personal strengths and resources: qualities, skills, supportive relationships, and past successes. Review this list regularly, especially when facing challenges, to remind yourself of your capacity for resilience."
        },
    ],
}

MENTAL_HEALTH_RESOURCES = [
    {
        "title": "Crisis Text Line",
        "content": "Free 24/7 text-based mental health support and crisis intervention",
        "url": "https://www.crisistextline.org/",
        "contact": "Text HOME to 741741"
    },
    {
        "title": "National Suicide Prevention Lifeline",
        "content": "Free and confidential support for people in distress",
        "url": "https://988lifeline.org/",
        "contact": "Call or text 988"
    },
    {
        "title": "SAMHSA's National Helpline",
        "content": "Treatment referral and information service for individuals facing mental health or substance use disorders",
        "url": "https://www.samhsa.gov/find-help/national-helpline",
        "contact": "1-800-662-HELP (4357)"
    },
    {
        "title": "Psychology Today Therapist Finder",
        "content": "Directory to find therapists, psychiatrists, treatment centers and support groups near you",
        "url": "https://www.psychologytoday.com/us/therapists"
    },
    {
        "title": "MentalHealth.gov",
        "content": "U.S. government information and resources on mental health",
        "url": "https://www.mentalhealth.gov/"
    },
    {
        "title": "National Alliance on Mental Illness (NAMI)",
        "content": "Nation's largest grassroots mental health organization dedicated to building better lives for Americans affected by mental illness",
        "url": "https://www.nami.org/",
        "contact": "NAMI Helpline: 1-800-950-NAMI (6264)"
    },
    {
        "title": "Headspace",
        "content": "Meditation and mindfulness app with exercises for stress, anxiety, sleep, and focus",
        "url": "https://www.headspace.com/"
    },
    {
        "title": "Calm",
        "content": "App for sleep, meditation and relaxation",
        "url": "https://www.calm.com/"
    },
    {
        "title": "7 Cups",
        "content": "Online therapy and free emotional support",
        "url": "https://www.7cups.com/"
    },
    {
        "title": "Talkspace",
        "content": "Online therapy platform connecting users with licensed therapists",
        "url": "https://www.talkspace.com/"
    },
]

# Entries with a direct contact line
CRISIS_CONTACT_RESOURCES = [resource for resource in MENTAL_HEALTH_RESOURCES if "contact" in resource]


CRISIS_RESOURCES_BY_COUNTRY = {
    'US': CrisisResources(
        country='United States',
        emergency_number='911',
        resources=[
            CrisisContact(
                name='988 Suicide & Crisis Lifeline',
                description='The Lifeline provides 24/7, free and confidential support for people in distress, prevention and crisis resources.',
                phone='988',
                sms='Text HOME to 741741',
                chat='https://988lifeline.org/chat/',
                website='https://988lifeline.org/',
                hours='24/7',
                languages=['English', 'Spanish'],
            ),
            CrisisContact(
                name='Crisis Text Line',
                description='Free, 24/7 support for those in crisis. Text with a trained Crisis Counselor.',
                sms='Text HOME to 741741',
                website='https://www.crisistextline.org/',
                hours='24/7',
                languages=['English'],
            ),
            CrisisContact(
                name='Veterans Crisis Line',
                description='Connects veterans and their families in crisis with qualified responders through a confidential toll-free hotline.',
                phone='988, Press 1',
                sms='Text 838255',
                chat='https://www.veteranscrisisline.net/get-help/chat',
                website='https://www.veteranscrisisline.net/',
                hours='24/7',
                languages=['English'],
            ),
        ],
    ),
    'UK': CrisisResources(
        country='United Kingdom',
        emergency_number='999',
        resources=[
            CrisisContact(
                name='Samaritans',
                description='Provides emotional support to anyone in emotional distress or struggling to cope.',
                phone='116 123',
                email='jo@samaritans.org',
                website='https://www.samaritans.org/',
                hours='24/7',
                languages=['English'],
            ),
            CrisisContact(
                name='SHOUT',
                description='Text service for anyone in crisis anytime, anywhere.',
                sms='Text SHOUT to 85258',
                website='https://giveusashout.org/',
                hours='24/7',
                languages=['English'],
            ),
            CrisisContact(
                name='CALM (Campaign Against Living Miserably)',
                description='Provides support to men in the UK who are down or in crisis.',
                phone='0800 58 58 58',
                website='https://www.thecalmzone.net/',
                hours='5pm-midnight, 365 days a year',
                languages=['English'],
            ),
        ],
    ),
    'CA': CrisisResources(
        country='Canada',
        emergency_number='911',
        resources=[
            CrisisContact(
                name='Talk Suicide Canada',
                description='Free, confidential support to anyone thinking about suicide or concerned about someone else.',
                phone='1-833-456-4566',
                sms='Text 45645 (4pm-midnight ET)',
                website='https://talksuicide.ca/',
                hours='24/7 for calls, 4pm-midnight for texts',
                languages=['English', 'French'],
            ),
            CrisisContact(
                name='Crisis Services Canada',
                description='Provides support and resources for those in crisis.',
                phone='1-833-456-4566',
                sms='Text 45645',
                website='https://www.crisisservicescanada.ca/',
                hours='24/7',
                languages=['English', 'French'],
            ),
        ],
    ),
    'AU': CrisisResources(
        country='Australia',
        emergency_number='000',
        resources=[
            CrisisContact(
                name='Lifeline Australia',
                description='Crisis support and suicide prevention services.',
                phone='13 11 14',
                sms='Text 0477 13 11 14',
                chat='https://www.lifeline.org.au/crisis-chat/',
                website='https://www.lifeline.org.au/',
                hours='24/7',
                languages=['English'],
            ),
            CrisisContact(
                name='Beyond Blue',
                description='Mental health support and resources.',
                phone='1300 22 4636',
                chat='https://www.beyondblue.org.au/get-support/get-immediate-support',
                website='https://www.beyondblue.org.au/',
                hours='24/7',
                languages=['English'],
            ),
        ],
    ),
    'NZ': CrisisResources(
        country='New Zealand',
        emergency_number='111',
        resources=[
            CrisisContact(
                name='Lifeline Aotearoa',
                description='Confidential support for people experiencing emotional distress.',
                phone='0800 543 354',
                sms='Text HELP to 4357',
                website='https://www.lifeline.org.nz/',
                hours='24/7',
                languages=['English'],
            ),
            CrisisContact(
                name='1737 Need to Talk?',
                description='Free call or text to talk with a trained counsellor.',
                phone='1737',
                sms='Text 1737',
                website='https://1737.org.nz/',
                hours='24/7',
                languages=['English'],
            ),
        ],
    ),
    'IN': CrisisResources(
        country='India',
        emergency_number='112',
        resources=[
            CrisisContact(
                name='AASRA',
                description='Crisis intervention center for the depressed and suicidal.',
                phone='91-9820466726',
                website='http://www.aasra.info/',
                hours='24/7',
                languages=['English', 'Hindi'],
            ),
            CrisisContact(
                name='Vandrevala Foundation',
                description='Mental health support and crisis intervention.',
                phone='1860 2662 345',
                website='https://www.vandrevalafoundation.com/',
                hours='24/7',
                languages=['English', 'Hindi'],
            ),
        ],
    ),
}

# ISO codes returned by geolocation services that map onto another table
COUNTRY_ALIASES = {
    'GB': 'UK',
}
