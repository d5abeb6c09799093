"""Dominio de evaluación de reservas de vehículos."""
