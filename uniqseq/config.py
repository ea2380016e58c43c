# uniqseq/config.py
# Configuration for the sequence service, client and benchmark harness

# Network config
HOST = '127.0.0.1'
PORT = 5000

GENERATOR_MODE = 'qpr'  # 'qpr' | 'naive' | 'bitmap'
# Seed configuration (used when a request does not carry its own seed):
# - SEED_MODE:
#     'fixed'  : use the integer in SEED (if SEED is None, falls back to 1)
#     'random' : use os.urandom(4) per request (non-deterministic)
#     'time'   : use current unix time - useful to get a new order per run
SEED_MODE = 'fixed'   # 'fixed' | 'random' | 'time'

# If SEED_MODE == 'fixed', use this SEED (32-bit integer).
SEED = 0x1  # or None

# If SEED_MODE == 'time', this controls whether we use seconds or milliseconds.
TIME_GRANULARITY = 's'  # 's' or 'ms'

# Largest number of values a single /take request may return.
MAX_TAKE = 100000

# Largest range the service accepts for the naive and bitmap baselines.
MAX_BASELINE_RANGE = 10_000_000

# Largest 32-bit prime p with p % 4 == 3. Ranges above it are clamped.
PRIME_CEILING = 4294967291

# Upper bound on "next prime" calls made while looking for p % 4 == 3.
PRIME_SEARCH_MAX_STEPS = 1000

# Logging level
LOG_LEVEL = 'INFO'
