"""Модели Swagger документа и сгенерированного проекта"""
