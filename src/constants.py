"""All magic values live here — no inline literals anywhere else."""

# Telegram typing indicator re-send interval (seconds).
# The TYPING action expires after ~5 s, so we refresh every 4 s.
TELEGRAM_TYPING_INTERVAL: float = 4.0

# Vision backends
PROVIDER_GEMINI = "gemini"
PROVIDER_CLAUDE = "claude"
PROVIDER_OPENAI = "openai"
SUPPORTED_PROVIDERS = (PROVIDER_GEMINI, PROVIDER_CLAUDE, PROVIDER_OPENAI)

DEFAULT_GEMINI_MODEL = "gemini-1.5-flash"
CLAUDE_VISION_MODEL = "claude-opus-4-6"
CLAUDE_MAX_TOKENS = 1024
OPENAI_VISION_MODEL = "gpt-4o"

# Image acquisition
DEFAULT_MIME_TYPE = "image/jpeg"
UNKNOWN_MIME_TYPE = "application/octet-stream"
IMAGE_MIME_PREFIX = "image/"
CAMERA_PREVIEW_HANDLE = "camera-capture"
CAMERA_JPEG_EXT = ".jpg"
CAMERA_WARMUP_FRAMES = 5
CAMERA_WINDOW_TITLE = "Plant Sage — space to capture, esc to cancel"
CAMERA_CAPTURE_KEYS = (ord(" "), 13)
CAMERA_CANCEL_KEYS = (27, ord("q"))

# Fixed identification prompt. The reply parser depends on these labels.
IDENTIFY_PROMPT = (
    "Identify the plant in this image and provide the following information:\n"
    "1. Common Name: [Primary name of the plant]\n"
    '2. Alternative Name: [Another common name, if applicable. If none, write "None"]\n'
    "3. Scientific Name: [Botanical name of the plant]\n"
    "4. Description: [A brief description of the plant's appearance, "
    "characteristics, and care requirements]\n"
    "\n"
    "Please format your response exactly as follows:\n"
    "Common Name: [Answer]\n"
    "Alternative Name: [Answer]\n"
    "Scientific Name: [Answer]\n"
    "Description: [Answer]"
)

# Reply labels
LABEL_COMMON_NAME = "Common Name"
LABEL_ALTERNATIVE_NAME = "Alternative Name"
LABEL_SCIENTIFIC_NAME = "Scientific Name"
LABEL_DESCRIPTION = "Description"
NO_ALTERNATIVE_NAME = "None"

# Log / user-facing messages
MSG_BOT_STARTING = "Starting Telegram bot…"
MSG_BLOCKED_CHAT = "Blocked update from chat_id: %s"
MSG_API_KEY_MISSING = "%s API key is not set — identification requests will fail"
MSG_TOKEN_MISSING = "TELEGRAM_BOT_TOKEN must be set in .env to run the bot"
MSG_SEND_OK = "✓ Sent (%.1fs)"
MSG_SEND_FAIL = "✗ Send failed (%.1fs)"
MSG_IDENTIFYING = "Identifying plant…"
MSG_SUBMITTING = "Submitting %d-byte %s image (%s)"
MSG_IDENTIFY_OK = "Identified %s (%.1fs)"
MSG_IDENTIFY_FAILED = "Error identifying plant: %s"
MSG_STALE_RESPONSE = "Discarding superseded response (token %d, latest %d)"
MSG_CAMERA_UNAVAILABLE = (
    "Unable to access camera. Please make sure you've granted the necessary permissions."
)
MSG_CAMERA_NO_FRAME = "Camera opened but returned no frame"
MSG_CAMERA_ENCODE_FAILED = "Could not encode captured frame as JPEG"
MSG_CAMERA_PREVIEW_FAILED = "Cannot show camera preview: %s"
MSG_CAMERA_RELEASED = "Camera %s released"
MSG_CAMERA_CANCELLED = "Camera cancelled — nothing to identify."
MSG_MALFORMED_RESPONSE = "Response is missing required fields: %s"
MSG_NOT_AN_IMAGE = "Please send a photo or an image file."

# Result card
CARD_ALSO_KNOWN_AS = "Also known as: %s"

# Telegram commands
CMD_CAMERA = "camera"
CMD_HELP = "help"
CMD_START = "start"

MSG_HELP = (
    "Plant Sage — identify plants from a photo\n"
    "\n"
    "Send a photo (or an image file) and I'll reply with:\n"
    "  • common name\n"
    "  • alternative name, if there is one\n"
    "  • scientific name\n"
    "  • a short description with care notes\n"
    "\n"
    "Commands:\n"
    "  /help    — show this message\n"
    "  /camera  — capture a photo from the host camera\n"
)
