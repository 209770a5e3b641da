"""passcoder: random password and passcode generation with local persistence."""

__version__ = "0.1.0"

from .generator import generate_passcode, generate_password  # noqa: E402

__all__ = ["__version__", "generate_passcode", "generate_password"]
