"""Domaine: entites Veezi et ports."""
