"""
brlaw - Resolucao de citacoes da legislacao federal brasileira.

Converte referencias livres ("Art. 1º, Lei nº 13.709/2018", "Art. 5º, LGPD",
"lei-13709-2018, art. 1") em uma representacao estruturada e faz o caminho
inverso (estrutura -> citacao canonica).
"""

__version__ = "1.0.0"
