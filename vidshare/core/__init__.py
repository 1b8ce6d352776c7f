"""
Couche domaine (core).

Contient les entites metier, ports (interfaces abstraites), objets valeur
et le generateur d'identifiants.
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, CLI).

Sous-packages :
- entities/ : Entites metier (Comment, Video, Channel, Playlist, User)
- ports/ : Interfaces abstraites des tables de l'annuaire
- value_objects/ : Objets valeur immutables (OpResult, OpStatus, PlaylistEntry)
"""
