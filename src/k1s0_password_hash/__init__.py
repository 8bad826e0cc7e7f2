"""k1s0 password hash library."""

from .config import HasherConfig, load_config
from .encoding import decode, encode
from .exceptions import (
    EntropyUnavailableError,
    KdfResourceExceededError,
    MalformedVerifierError,
    PasswordHashError,
    PasswordHashErrorCodes,
    UnsupportedAlgorithmError,
)
from .hasher import (
    ScryptPasswordHasher,
    hash_password,
    hash_password_async,
    verify_password,
    verify_password_async,
)
from .kdf import derive_key, required_memory
from .logger import new_logger
from .models import ALGORITHM, KdfParameters, VerifierRecord
from .salt import generate_salt

__all__ = [
    "ALGORITHM",
    "KdfParameters",
    "VerifierRecord",
    "HasherConfig",
    "load_config",
    "ScryptPasswordHasher",
    "hash_password",
    "hash_password_async",
    "verify_password",
    "verify_password_async",
    "generate_salt",
    "derive_key",
    "required_memory",
    "encode",
    "decode",
    "new_logger",
    "PasswordHashError",
    "PasswordHashErrorCodes",
    "EntropyUnavailableError",
    "KdfResourceExceededError",
    "MalformedVerifierError",
    "UnsupportedAlgorithmError",
]
