DEFAULT_NAME = "generic"
