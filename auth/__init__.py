"""
auth — User authentication module.

Provides:
  • Password hashing (bcrypt, salted, adaptive work factor)
  • Signed token creation & verification (HMAC-SHA256)
  • ``AuthService`` — signup / login
  • Signup / Login API routes
"""
