class InvalidWindowSizeError(Exception):
    def __init__(self, max_days: int):
        self.max_days = max_days
        super().__init__(f"Window size must be a positive number of days, got {max_days}")
