# Admin authentication
# No tables are involved: admins are the passcode accounts configured through
# ADMIN_EMAIL_n / ADMIN_PASSCODE_n, and sessions are stateless JWTs.

"""
Admin token claims (HS256, signed with JWT_SECRET):
- email: str - must be one of the configured admin emails
- name: str - display name (ADMIN_NAMES mapping, default "Admin")
- isAdmin: bool - always true for issued tokens
- loginTime: int - epoch milliseconds of the login
- exp: int - expiry (ADMIN_TOKEN_TTL_DAYS after login)

The token is returned in the login body and mirrored in an httpOnly
"admin-token" cookie. Clients send it as "Authorization: Bearer <token>".
"""
