"""
Couche adaptateurs de vidshare.

- cli/ : Shell interactif et commandes Typer
"""
