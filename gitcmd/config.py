from pathlib import Path

# Git settings
GIT_BINARY = "git"
GIT_BINARY_ENV = "GITCMD_GIT_BINARY"

# Config file
CONFIG_FILE_ENV = "GITCMD_CONFIG"
DEFAULT_CONFIG_FILE = Path.home() / ".gitcmd.yaml"

# Invocation history
HISTORY_FILE_ENV = "GITCMD_HISTORY_FILE"
