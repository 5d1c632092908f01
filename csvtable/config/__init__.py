"""
Configuration loading and validation.

Provides strongly typed settings objects for the byte store backend, the HTTP
object store and logging, loaded from environment variables with upfront
validation.
"""
