"""
auth — User authentication module.

Provides:
  • Token issuance & verification (``auth.jwt.TokenService``)
  • Password hashing with bcrypt (``auth.password.PasswordHasher``)
  • ``get_current_user_id`` FastAPI dependency gating protected routes
"""
