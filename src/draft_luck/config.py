from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
OUTPUT_DIR = DATA_DIR / "stats"
LOG_DIR = PROJECT_ROOT / "logs"

# Shaft-o-meter scale (0 = unluckiest, 5 = luckiest)
LUCK_SCORE_MIN = 0
LUCK_SCORE_MAX = 5
LUCK_SCORE_CENTER = 2.5  # Score for a member sitting exactly on the mean

# Output formatting
NOT_APPLICABLE = "N/A"  # Rendered for members with no attended drafts
PERCENT_SCALE = 100
ROUND_DECIMALS = 1
