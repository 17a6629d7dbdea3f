"""Command line interface for voicer-deploy"""
