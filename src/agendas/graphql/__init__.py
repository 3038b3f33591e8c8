"""
GraphQL API for agendas
"""
