"""Currency app package.

Tour prices are quoted and charged in ZAR. Visitors may view USD
estimates, converted with a cached USD -> ZAR exchange rate that falls
back to a fixed default when no live rate is available.
"""
