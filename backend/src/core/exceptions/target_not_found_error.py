class TargetNotFoundError(Exception):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Target with key='{key}' is not registered")
