DEFAULT_SCRIPT_URL = (
    "https://script.google.com/macros/s/"
    "AKfycbykykylOeRhdfhgnZ7rK-COdZwz8CD7eYL22UcO4xt3wvbTY8aXzSL1zfd0va9HdIw9Xw/exec"
)
DEFAULT_TIMEOUT = 20.0
DEFAULT_LOG_LEVEL = "INFO"

ACTION_GET = "getMatches"
ACTION_ADD = "addMatch"

FORMATS = [
    "Standard", "Pioneer", "Modern", "Legacy", "Vintage",
    "Commander", "Limited", "Draft", "Sealed", "Pauper",
]
PLAY_DRAW = {"Play": "On the Play", "Draw": "On the Draw"}
SIDEBOARD_STAGES = ["Pre-Sideboard", "Post-Sideboard"]

# Form fields that can switch between a dropdown and free-text entry
MANUAL_FIELDS = ("player", "opponent", "player_deck", "opponent_deck")
