"""
radarscope - air traffic control radar training simulator
"""
