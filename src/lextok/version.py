from importlib.metadata import PackageNotFoundError, version

try:
    version = version("LexTok")
except PackageNotFoundError:
    version = "0.0.0"
