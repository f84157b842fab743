from __future__ import annotations

TEST_SECRET = "test-secret-for-noteful-0123456789abcdef"
# Low work factor keeps the suite fast; production uses scrypt.
FAST_HASH_METHOD = "pbkdf2:sha256:1000"

USERNAME = "exampleUser"
PASSWORD = "examplePass"
FULLNAME = "Example User"
USER_ID = "333333333333333333333300"
