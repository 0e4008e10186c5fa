"""
Car buy vs. lease calculator - web layer
"""
