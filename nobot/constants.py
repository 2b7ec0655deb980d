# MongoDB
MONGODB_SERVER_SELECTION_TIMEOUT_MS = 5000
DEFAULT_MONGO_DB_NAME = "nobot"
AGENDA_COLLECTION = "agendas"

# Bot identity
DEFAULT_BOT_NAME = "nobot"
DEFAULT_BOT_ALIASES = ("awesomebot", "bot")

# Who gets blamed when someone asks the bot to book a meeting "with" somebody
MEETING_OWNER = "@stevenmilne"
