from .config import calculation_configuration, models_configuration, setup_logging
