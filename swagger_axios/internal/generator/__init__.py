"""Генераторы TypeScript кода"""
