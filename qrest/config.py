import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    DB_PATH = os.getenv("QREST_DB_PATH")
    FLUSH_INTERVAL = float(os.getenv("QREST_FLUSH_INTERVAL", "30"))
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3000"))


class DevConfig(Config):
    DEBUG = True


class ProdConfig(Config):
    DEBUG = False
