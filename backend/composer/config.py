import os
from dotenv import load_dotenv

load_dotenv()

class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # "overwrite" keeps last-write-wins for duplicate section ids, "strict" refuses to start
    SECTION_DUPLICATE_POLICY = os.getenv("SECTION_DUPLICATE_POLICY", "overwrite")

    AI_MAX_TOKENS = int(os.getenv("AI_MAX_TOKENS", "2000"))
    AI_TEMPERATURE = float(os.getenv("AI_TEMPERATURE", "0.7"))

    PAGES_PER_PAGE = int(os.getenv("PAGES_PER_PAGE", "10"))

class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///composer-dev.db")

class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SECTION_DUPLICATE_POLICY = "strict"

class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")

config_by_name = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig
}
