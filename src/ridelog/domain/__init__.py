"""Domain layer for ridelog application."""

__all__ = [
    "ExpenseService",
    "IncomeService",
    "MileageService",
    "WorkHoursService",
    "DashboardService",
]

_SERVICE_MODULES = {
    "ExpenseService": "ridelog.domain.expense",
    "IncomeService": "ridelog.domain.income",
    "MileageService": "ridelog.domain.mileage",
    "WorkHoursService": "ridelog.domain.work_hours",
    "DashboardService": "ridelog.domain.dashboard",
}


# Import services lazily; they depend on ridelog.database, which itself
# imports ridelog.domain.entities.
def __getattr__(name):
    if name in _SERVICE_MODULES:
        from importlib import import_module

        return getattr(import_module(_SERVICE_MODULES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
