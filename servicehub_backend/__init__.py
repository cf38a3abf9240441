"""
Package initializer for the service marketplace backend.

Holds the project settings, URL configuration and the ASGI entry point.
"""
