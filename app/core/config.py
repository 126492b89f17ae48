import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    SUPABASE_URL: str = os.getenv("SUPABASE_URL")
    SUPABASE_KEY: str = os.getenv("SUPABASE_KEY")

    # "supabase" reads the managed store, "csv" reads DATA_DIR
    DATA_SOURCE: str = os.getenv("DATA_SOURCE", "supabase").lower()
    DATA_DIR: str = os.getenv("DATA_DIR", "data")

    # Daily cost model (food/incidentals + attraction visits per day)
    DAILY_FOOD_ALLOWANCE: int = int(os.getenv("DAILY_FOOD_ALLOWANCE", "1500"))
    ATTRACTIONS_PER_DAY: int = int(os.getenv("ATTRACTIONS_PER_DAY", "3"))
    CURRENCY_SYMBOL: str = os.getenv("CURRENCY_SYMBOL", "₹")

    READ_TIMEOUT_SECONDS: float = float(os.getenv("READ_TIMEOUT_SECONDS", "5"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
