# Indexed by datetime.weekday(); fixed English names so comparisons do not depend on locale
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
