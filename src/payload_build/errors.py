from .const import ERRORS


class PayloadError(Exception):
    code = ""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"{ERRORS[self.code]} {detail}")


class InputOpenError(PayloadError):
    code = "E_INPUT_OPEN"

    def __init__(self, path: str):
        self.path = path
        super().__init__(path)


class OutputOpenError(PayloadError):
    code = "E_OUTPUT_OPEN"

    def __init__(self, path: str):
        self.path = path
        super().__init__(path)


class InvalidConfigurationError(PayloadError):
    code = "E_CONFIG_INVALID"


class PayloadTooLargeError(PayloadError):
    code = "E_PAYLOAD_SIZE"

    def __init__(self, path: str):
        self.path = path
        super().__init__(path)
