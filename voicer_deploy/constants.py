"""Global constants for voicer-deploy"""

APP_NAME = "voicer-deploy"

# Default platform layout
DEFAULT_APP_DIR = "/opt/voicer-platform"
DEFAULT_ENV_PATH = "/home/ubuntu/miniconda3/envs/voicer-env"
DEFAULT_STATE_FILE_NAME = ".last_deploy_commit"
DEFAULT_LOG_FILE = "~/.voicer/deploy.log"

# Canonical list of platform services
DEFAULT_SERVICES = [
    "voicer-main",
    "voicer-ar",
    "voicer-stats",
    "voicer-anno",
    "voicer-prev",
]

# Source synchronization
DEFAULT_REMOTE = "origin"
DEFAULT_BRANCH = "main"
DEFAULT_MANIFEST = "requirements.txt"

# Pause between consecutive service restarts
DEFAULT_RESTART_PAUSE = 1.0  # seconds

# Project configuration file looked up in the working directory
PROJECT_CONFIG_FILE = ".voicer-deploy.yaml"

# Logging
LOG_FORMAT = "%(message)s"

# Deploy log line
DEPLOY_LOG_DATE_FORMAT = "%a %b %d %H:%M:%S %Z %Y"
DEPLOY_LOG_LINE = "{date}: Deployment completed successfully (commit {commit}) [services: {services}]"


# Error codes
class ErrorCode:
    CONFIG_ERROR = "VD001"
    SYNC_FAILED = "VD002"
    DEPENDENCY_INSTALL_FAILED = "VD003"
    RESTART_FAILED = "VD004"
    HEALTH_CHECK_FAILED = "VD005"
    COMMAND_FAILED = "VD006"
    STATE_WRITE_FAILED = "VD007"
    STATE_READ_FAILED = "VD008"


# Environment variables
ENV_CONFIG_PATH = "VOICER_DEPLOY_CONFIG"
ENV_APP_DIR = "VOICER_DEPLOY_APP_DIR"
ENV_ENV_PATH = "VOICER_DEPLOY_ENV_PATH"
ENV_SERVICES = "VOICER_DEPLOY_SERVICES"
ENV_STATE_FILE = "VOICER_DEPLOY_STATE_FILE"
ENV_LOG_FILE = "VOICER_DEPLOY_LOG_FILE"

# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

# Emoji for status lines
EMOJI_START = "🚀"
EMOJI_SELECT = "🧩"
EMOJI_SEARCH = "🔎"
EMOJI_PULL = "📥"
EMOJI_COMMIT = "🧾"
EMOJI_FILES = "📂"
EMOJI_PACKAGE = "📦"
EMOJI_RELOAD = "🔁"
EMOJI_RESTART = "🔄"
EMOJI_HEALTH = "🩺"
EMOJI_LOG = "📘"
EMOJI_DONE = "🎉"
EMOJI_SUCCESS = "✅"
EMOJI_ERROR = "❌"
EMOJI_WARNING = "⚠️"
EMOJI_ARROW = "→"
EMOJI_CYCLE = "↻"

# Message templates
MSG_START = f"{EMOJI_START} Starting Voicer platform deployment..."
MSG_SELECTED_FROM_ARGS = f"{EMOJI_SELECT} Selected services to deploy (from arguments): {{services}}"
MSG_SELECTED_ALL = f"{EMOJI_SELECT} No services specified, deploying ALL: {{services}}"
MSG_PREVIOUS_COMMIT = f"{EMOJI_SEARCH} Previous commit: {{commit}}"
MSG_PULLING = f"{EMOJI_PULL} Pulling latest code (reset to {{ref}})..."
MSG_CURRENT_COMMIT = f"{EMOJI_COMMIT} Current commit:  {{commit}}"
MSG_NO_NEW_COMMITS = (
    f"{EMOJI_SUCCESS} No new commits on {{ref}}. "
    "Skipping dependency install and service restarts."
)
MSG_CHANGED_FILES = f"{EMOJI_FILES} Files changed since last deploy:"
MSG_FRESH_DEPLOY = (
    f"{EMOJI_FILES} Initial deploy or no previous commit recorded. "
    "Treating as fresh deployment."
)
MSG_DEPS_CHANGED = f"{EMOJI_PACKAGE} {{manifest}} changed {EMOJI_ARROW} updating Python dependencies..."
MSG_DEPS_UNCHANGED = f"{EMOJI_PACKAGE} {{manifest}} unchanged {EMOJI_ARROW} skipping pip install."
MSG_DAEMON_RELOAD = f"{EMOJI_RELOAD} Reloading systemd units (daemon-reload)..."
MSG_RESTARTING = f"{EMOJI_RESTART} Restarting selected services: {{services}}"
MSG_UNKNOWN_SERVICE = (
    f"{EMOJI_WARNING}  Warning: {{service}} is not in the canonical service list. "
    "Trying to restart anyway..."
)
MSG_RESTART_ONE = f"{EMOJI_CYCLE} Restarting {{service}}..."
MSG_RESTART_FAILED = f"{EMOJI_ERROR} Failed to restart {{service}}"
MSG_CHECKING = f"{EMOJI_HEALTH} Checking service statuses..."
MSG_SERVICE_RUNNING = f"{EMOJI_SUCCESS} {{service}} is running"
MSG_SERVICE_DOWN = f"{EMOJI_ERROR} {{service}} FAILED to start!"
MSG_LOGGING = f"{EMOJI_LOG} Logging deployment timestamp..."
MSG_FINISHED = f"{EMOJI_DONE} Deployment finished successfully!"
