from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "printcalc"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    # Normalization - nozzle sizes come from a 1-decimal radio set
    DEFAULT_DECIMAL_PLACES: int = 2
    NOZZLE_DECIMAL_PLACES: int = 1

    # Layer height / nozzle diameter ratio (20% - 80%)
    LAYER_RATIO_MIN: float = 0.2
    LAYER_RATIO_MAX: float = 0.8

    # Z step resolution most slicers/printers expect
    LAYER_STEP_MM: float = 0.02
    LAYER_STEP_TOLERANCE_MM: float = 0.001

    # Calibration cube: 4 walls x 5 measurements
    FLOW_MEASUREMENT_COUNT: int = 20

    class Config:
        env_file = ".env"


settings = Settings()
