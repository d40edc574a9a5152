"""ml_salaries dashboard package."""

from .config import DashboardConfig
from .controller import DashboardController
from .loader import load_salary_data

__all__ = ["DashboardConfig", "DashboardController", "load_salary_data"]
