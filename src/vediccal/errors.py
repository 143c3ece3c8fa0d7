class VedicCalendarError(ValueError):
  """Base error for the calendar core."""


class InvalidLocation(VedicCalendarError):
  def __init__(self, latitude, longitude):
    self.latitude = latitude
    self.longitude = longitude
    super().__init__(f"invalid location: latitude={latitude!r}, longitude={longitude!r}")


class UnresolvableTimezone(VedicCalendarError):
  def __init__(self, timezone_id):
    self.timezone_id = timezone_id
    super().__init__(f"unknown timezone: {timezone_id!r}")
