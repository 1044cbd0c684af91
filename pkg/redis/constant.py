DEFAULT_HOST = "localhost"
DEFAULT_PORT = 6379
DEFAULT_DB = 0
DEFAULT_SSL = False
DEFAULT_ENCODING = "utf-8"
DEFAULT_DECODE_RESPONSES = True
DEFAULT_MAX_CONNECTIONS = 50
DEFAULT_SOCKET_TIMEOUT = 5
DEFAULT_SOCKET_CONNECT_TIMEOUT = 5
DEFAULT_SOCKET_KEEPALIVE = True
DEFAULT_HEALTH_CHECK_INTERVAL = 30

# TTL values at or below this store the key without expiration
NO_EXPIRATION = 0

# Hashing
HASH_ENCODING = "utf-8"
JSON_SEPARATORS = (",", ":")

# Config validation errors
ERROR_HOST_EMPTY = "host cannot be empty"
ERROR_INVALID_PORT = "port must be between 1 and 65535"
ERROR_INVALID_DB = "db must be non-negative"
ERROR_INVALID_MAX_CONNECTIONS = "max_connections must be positive"
ERROR_INVALID_SOCKET_TIMEOUT = "socket_timeout must be positive"

# Operation errors
ERROR_CONNECT_FAILED = "Failed to connect to Redis at {address}: {error}"
ERROR_KEY_NOT_FOUND = "Key not found: {key}"
ERROR_SET_FAILED = "Redis SET failed for key '{key}': {error}"
ERROR_GET_FAILED = "Redis GET failed for key '{key}': {error}"
ERROR_DELETE_FAILED = "Redis DEL failed for keys {keys}: {error}"
ERROR_KEYS_FAILED = "Redis KEYS failed for pattern '{pattern}': {error}"
ERROR_PING_FAILED = "Redis PING failed: {error}"
