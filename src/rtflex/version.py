from importlib.metadata import PackageNotFoundError, version

try:
    version = version("RtfLex")
except PackageNotFoundError:
    version = "0.0.0"
