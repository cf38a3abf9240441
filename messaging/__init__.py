"""Messaging app initialization.

The messaging app enables direct messages between marketplace users and
providers.  It registers itself with Django via the MessagingConfig class.
"""
