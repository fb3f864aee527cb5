"""Внутренняя реализация генератора"""
