"""
Identity subsystem.

Components:
- user_models.py: data structures (User)
- user_store.py: SQLite-backed user storage (unique usernames)
- hashing.py: bcrypt-backed PasswordHasher
- identity_service.py: sign-up and credential validation
- credentials.py: username/password policy checks for user input
"""
