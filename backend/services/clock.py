import time
from datetime import date

from domain.interfaces import IClock


class SystemClock(IClock):
    def current_year(self) -> int:
        return date.today().year

    def timestamp(self) -> int:
        return int(time.time())
