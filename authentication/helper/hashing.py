import bcrypt
from ..config.settings import BCRYPT_ROUNDS

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72

class Hash():
    @staticmethod
    def generate_hash(password: str) -> str:
        try:
            if not password:
                raise ValueError("Password cannot be empty")
            pwd_bytes = password.encode('utf-8')[:BCRYPT_MAX_BYTES]
            salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
            hashed_password = bcrypt.hashpw(password=pwd_bytes, salt=salt)
            return hashed_password.decode('utf-8')
        except Exception as e:
            raise ValueError("Password hashing failed") from e

    @staticmethod
    async def verify(hashed_password, plain_password) -> bool:
        try:
            if not hashed_password or not plain_password:
                return False

            if isinstance(plain_password, str):
                plain_password = plain_password.encode('utf-8')

            if isinstance(hashed_password, str):
                hashed_password = hashed_password.encode('utf-8')

            # checkpw compares in constant time
            return bcrypt.checkpw(plain_password[:BCRYPT_MAX_BYTES], hashed_password)
        except ValueError:
            return False # malformed hash, don't expose error details
