from importlib.metadata import PackageNotFoundError, version

try:
    version = version("ParseKit")
except PackageNotFoundError:
    version = "0.0.0"
