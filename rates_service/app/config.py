import os

TCMB_BASE_URL = os.getenv("TCMB_BASE_URL", "https://www.tcmb.gov.tr/kurlar").rstrip("/")
TCMB_TIMEOUT = float(os.getenv("TCMB_TIMEOUT", "10"))

# Rates in the upstream documents are quoted against this currency
LOCAL_CURRENCY = os.getenv("LOCAL_CURRENCY", "TRY")

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOGSTASH_HOST = os.getenv("LOGSTASH_HOST")
LOGSTASH_PORT = int(os.getenv("LOGSTASH_PORT", "5000"))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
