"""
Modelos de dominio del proyecto sie-metrics.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from sie_metrics.domain.models import MetricasFinancieras, ProblemaLogico
"""

from sie_metrics.domain.models.cuenta import Cuenta
from sie_metrics.domain.models.evento_timeline import EventoTimeline
from sie_metrics.domain.models.metricas_financieras import (
    CUENTA_RESULTADO,
    MetricasFinancieras,
)
from sie_metrics.domain.models.partida_balance import PartidaBalance
from sie_metrics.domain.models.problema_logico import ProblemaLogico
from sie_metrics.domain.models.resultado_parseo import (
    ErrorFatal,
    ErrorRecuperable,
    ParseoExitoso,
    ResultadoParseo,
)
from sie_metrics.domain.models.verificacion import Transaccion, Verificacion

__all__ = [
    "CUENTA_RESULTADO",
    "Cuenta",
    "ErrorFatal",
    "ErrorRecuperable",
    "EventoTimeline",
    "MetricasFinancieras",
    "ParseoExitoso",
    "PartidaBalance",
    "ProblemaLogico",
    "ResultadoParseo",
    "Transaccion",
    "Verificacion",
]
