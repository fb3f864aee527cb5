"""Разбор Swagger 2.0 документа"""
