"""Chapel admin access control.

Role-based permission policy and admin section gating for the church
content-management app.
"""
