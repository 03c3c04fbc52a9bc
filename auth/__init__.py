"""
auth — User authentication module.

Provides:
  • JWT token creation & verification
  • Password hashing (bcrypt, cost factor 8)
  • Register / Login API routes
  • ``restricted`` FastAPI dependency guarding protected routes
"""
