"""Checkout app package.

Proxies checkout creation to the Yoco payment gateway so the secret API
key stays on the server, and describes the pages the gateway redirects
the customer back to.
"""
