from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "chord-shapes"
    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    FRONTEND_ORIGIN: str = "http://localhost:3000"

    # Form defaults when a request leaves them out
    DEFAULT_CHORD_GROUP: str = "Major Chords"
    DEFAULT_START_SHAPE: str = "Maj-Root6"
    DEFAULT_SEQUENCE: str = "C F Bb Eb"

    # Chord preview synth (sine voices, linear attack/release envelope)
    SYNTH_SAMPLE_RATE: int = 44100
    SYNTH_VOLUME: float = 0.2
    SYNTH_ATTACK_S: float = 0.05
    SYNTH_DURATION_S: float = 0.5

settings = Settings()
