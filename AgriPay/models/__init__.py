# models/__init__.py
from utils.db import Base  # re-export
from .employee import Employee
from .entrepreneur import Entrepreneur
from .user import User
from .harvest import Harvest
from .work_task import WorkTask
from .advance import Advance
from .rain_event import RainEvent
from .market_settings import MarketSettings
