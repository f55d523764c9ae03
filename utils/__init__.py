# Utility modules for the meal planner
from .sanitizer import sanitize_text
from .week import start_of_week_monday, week_days, in_week, parse_date
from .logging_utils import setup_logging, get_logger
