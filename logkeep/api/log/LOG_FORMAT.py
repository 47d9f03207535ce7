import re

LOG_HEADER = "Timestamp,Level,Message,Source"
LOG_EXTENSION = ".csv"

# yyyy-MM-dd HH:mm:ss:fff (milliseconds after a colon, not a dot)
TIMESTAMP_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2}) (\d{2}):(\d{2}):(\d{2}):(\d{3})$")

# Date token in file name patterns, with or without braces
DATE_TOKEN_PATTERN = re.compile(r"\{?yyyyMMdd\}?")
