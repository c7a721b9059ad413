"""Enquiries app package: the contact form on the website."""
