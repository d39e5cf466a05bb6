"""
Fixed content library for weekly challenges and daily questions.
"""

from .models import ChallengeTemplate

WEEKLY_CHALLENGES: list[ChallengeTemplate] = [
    ChallengeTemplate(
        id="gratitude-notes",
        category="Appreciation",
        title="Gratitude Notes",
        description="Leave your partner three notes this week, each naming something you're grateful for.",
        points=30,
    ),
    ChallengeTemplate(
        id="screen-free-dinner",
        category="Quality Time",
        title="Screen-Free Dinner",
        description="Share one full dinner with phones in another room.",
        points=20,
    ),
    ChallengeTemplate(
        id="memory-lane",
        category="Connection",
        title="Memory Lane",
        description="Each pick a favourite photo of you two and tell the story behind it.",
        points=25,
    ),
    ChallengeTemplate(
        id="new-recipe",
        category="Adventure",
        title="Cook Something New",
        description="Cook a recipe neither of you has made before, together.",
        points=30,
    ),
    ChallengeTemplate(
        id="walk-and-talk",
        category="Quality Time",
        title="Walk and Talk",
        description="Take a 30-minute walk together with no agenda.",
        points=20,
    ),
    ChallengeTemplate(
        id="love-letter",
        category="Romance",
        title="Old-School Love Letter",
        description="Write your partner a handwritten letter and swap them at the end of the week.",
        points=40,
    ),
    ChallengeTemplate(
        id="bucket-list",
        category="Dreams",
        title="Shared Bucket List",
        description="Write five things you want to do together in the next year.",
        points=25,
    ),
    ChallengeTemplate(
        id="compliment-streak",
        category="Appreciation",
        title="Daily Compliment",
        description="Give your partner one sincere compliment every day this week.",
        points=35,
    ),
    ChallengeTemplate(
        id="playlist",
        category="Fun",
        title="Our Playlist",
        description="Build a ten-song playlist together, five songs each.",
        points=20,
    ),
    ChallengeTemplate(
        id="chore-swap",
        category="Teamwork",
        title="Chore Swap",
        description="Swap one household chore you usually do for one your partner usually does.",
        points=25,
    ),
    ChallengeTemplate(
        id="stargazing",
        category="Romance",
        title="Look Up",
        description="Spend an evening watching the sky (or the city lights) together.",
        points=20,
    ),
    ChallengeTemplate(
        id="learn-together",
        category="Growth",
        title="Learn Something Together",
        description="Watch a talk or read an article together and discuss it.",
        points=30,
    ),
]

DAILY_QUESTIONS: list[str] = [
    "What made you smile today?",
    "What is one small thing I did recently that you appreciated?",
    "If we could teleport anywhere tonight, where would we go?",
    "What song reminds you of us?",
    "What is something you're looking forward to this week?",
    "What was your first impression of me?",
    "What is a tradition you'd like us to start?",
    "What is one thing you want to get better at this year?",
    "Which meal would you want to share with me every week?",
    "What is a memory of us you replay often?",
    "How can I support you better this week?",
    "What is a dream you haven't told many people about?",
    "What is your favourite way to spend a lazy Sunday together?",
    "What is something new you'd like to try together?",
    "What made you feel loved recently?",
    "What is one word that describes us?",
    "What would your perfect date look like?",
    "What is a book, film or show you want us to share?",
    "What is something you're proud of today?",
    "What do you miss most when we're apart?",
]
