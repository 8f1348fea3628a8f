"""csmstyle — map Checkstyle violations onto CSM principles and report them."""

__version__ = "0.3.0"
