"""
GraphQL API for the Vehicle Shop
"""
