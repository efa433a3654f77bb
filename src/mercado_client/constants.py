"""
Constants for the Mercado Bitcoin client.
"""

# API Configuration
DEFAULT_PUBLIC_URL = "https://www.mercadobitcoin.net/api"
DEFAULT_PRIVATE_URL = "https://www.mercadobitcoin.net/tapi/v3/"
DEFAULT_TIMEOUT = 30.0

# Transport
USER_AGENT = "mercado-client/1.0"
MAX_CONNECTIONS = 10

# Authentication Configuration
API_VERSION_PATH = "/tapi/v3/"
TAPI_ID_HEADER = "TAPI-ID"
TAPI_MAC_HEADER = "TAPI-MAC"

# Order formatting (decimal places)
DEFAULT_QUANTITY_DECIMALS = 8
DEFAULT_PRICE_DECIMALS = 2
