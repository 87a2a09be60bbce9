"""
Identifiants types des entites Veezi.

Chaque identifiant est un NewType autour de sa representation sur le fil
(entier ou chaine). A l'execution c'est la valeur primitive elle-meme:
egalite et hachage suivent exactement la valeur transmise par l'API, et
les identifiants servent directement de cles de cache. Le typage statique
empeche de passer un FilmId la ou un ScreenId est attendu.
"""

from typing import NewType

SessionId = NewType("SessionId", int)
FilmId = NewType("FilmId", str)
FilmPackageId = NewType("FilmPackageId", int)
ScreenId = NewType("ScreenId", int)
AttributeId = NewType("AttributeId", str)
PersonId = NewType("PersonId", str)
