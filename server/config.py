import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    DATABASE_NAME: str = os.getenv("DATABASE_NAME", "learning_paths")
    PATH_COLLECTION: str = os.getenv("PATH_COLLECTION", "paths")
    TEMPLATES_DIR: str = os.getenv("TEMPLATES_DIR", "paths")
    CORS_ORIGINS: list = os.getenv("CORS_ORIGINS", "*").split(",")


settings = Settings()
