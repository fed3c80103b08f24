from maskedprompt import __version__

APPLICATION_NAME: str = __name__[: __name__.index(".")]
APPLICATION_VERSION: str = __version__

CONFIG_VERSION: str = "0.1"

DEFAULT_PROMPT_TEXT: str = "Password:"

EXIT_CODE_ERROR: int = 1
EXIT_CODE_INTERRUPTED: int = 130

# NOTE: pygments.console has no inverse video or strikethrough codes so the raw SGR
# sequences are used for those
INVERSE_ON: str = "\x1b[7m"
INVERSE_OFF: str = "\x1b[27m"
STRIKETHROUGH_ON: str = "\x1b[9m"
STRIKETHROUGH_OFF: str = "\x1b[29m"

# insertion point marker used when color (and therefore inverse video) is disabled
PLAIN_CURSOR: str = "|"

S_BAR: str = "│"
S_BAR_END: str = "└"
S_PASSWORD_MASK: str = "▪"
S_STEP_ACTIVE: str = "◆"
S_STEP_CANCEL: str = "■"
S_STEP_ERROR: str = "▲"
S_STEP_SUBMIT: str = "◇"
