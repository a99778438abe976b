"""
User API.

CRUD microservice for user records stored in MongoDB, publishing a
user-changed event whenever an existing user is updated.
"""
