"""Movie catalog service"""
