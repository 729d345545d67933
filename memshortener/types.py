from collections.abc import Callable
from datetime import datetime


# Returns the current moment as a timezone-aware UTC datetime
type Clock = Callable[[], datetime]
