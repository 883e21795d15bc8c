"""
Security configuration for the authentication system.
"""

class SecurityConfig:
    """Security configuration class"""

    # Password requirements
    MIN_PASSWORD_LENGTH = 6
    MAX_PASSWORD_LENGTH = 128

    # Member profile
    MAX_NAME_LENGTH = 128

    # Roles
    ROLES = ("user", "admin")
    DEFAULT_ROLE = "user"

    # Refresh token entropy, in bytes of randomness
    REFRESH_TOKEN_BYTES = 40
