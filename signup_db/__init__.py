"""
Signup database bootstrap - MongoDB collections, validators, indexes and seed data
for the sign-up and onboarding feature.
"""
__version__ = "0.1.0"
