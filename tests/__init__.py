"""
Tests package - Test suite for the Keycloak admin client.

Contains:
- unit/: Unit tests run against an in-process mock transport
"""
