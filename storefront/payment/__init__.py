"""Payments, their configuration and the payment service."""