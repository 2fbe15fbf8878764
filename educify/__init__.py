"""Educify tutoring marketplace API"""
