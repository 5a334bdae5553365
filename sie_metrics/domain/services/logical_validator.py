"""
Servicio de dominio: Validador lógico de métricas financieras.

Función pura sobre unas MetricasFinancieras ya construidas. No modifica
nada y siempre revisa todo: si hay diez verificaciones descuadradas,
reporta las diez.

Orden fijo de los problemas devueltos:
1. BalanceSheet (error)  → activos ≠ pasivos + patrimonio (tolerancia 1 kr).
2. Voucher (error)       → uno por cada verificación que no suma cero.
3. Ambiguity (warning)   → saldos iniciales derivados de '#UB -1'.
"""

from decimal import Decimal

from sie_metrics.domain.models.metricas_financieras import MetricasFinancieras
from sie_metrics.domain.models.problema_logico import ProblemaLogico
from sie_metrics.domain.services.tag_reducer import MARCADOR_AMBIGUEDAD

TOLERANCIA_BALANCE = Decimal("1")
"""Diferencia máxima aceptada por redondeos entre activos y pasivos+patrimonio."""

TOLERANCIA_VERIFICACION = Decimal("0.01")


def validate_financial_metrics(metricas: MetricasFinancieras) -> list[ProblemaLogico]:
    """Revisa la consistencia interna de las métricas.

    Returns:
        Lista de ProblemaLogico, vacía si todo cuadra.
    """
    problemas: list[ProblemaLogico] = []

    problema_balance = _revisar_balance(metricas)
    if problema_balance is not None:
        problemas.append(problema_balance)

    problemas.extend(_revisar_verificaciones(metricas))

    if any(MARCADOR_AMBIGUEDAD in advertencia for advertencia in metricas.advertencias):
        problemas.append(
            ProblemaLogico(
                tipo="Ambiguity",
                severidad="warning",
                mensaje=(
                    "Los saldos iniciales se basan en los saldos finales del "
                    f"ejercicio anterior ({MARCADOR_AMBIGUEDAD})."
                ),
                detalles=(
                    "Es habitual en archivos SIE, pero conviene confirmar que es "
                    "lo esperado. Se interpretaron como saldos iniciales del ejercicio."
                ),
            )
        )

    return problemas


def _revisar_balance(metricas: MetricasFinancieras) -> ProblemaLogico | None:
    total_activos = metricas.total_activos
    total_pasivos_y_patrimonio = metricas.total_pasivos_y_patrimonio
    diferencia = total_activos - total_pasivos_y_patrimonio

    if abs(diferencia) <= TOLERANCIA_BALANCE:
        return None

    return ProblemaLogico(
        tipo="BalanceSheet",
        severidad="error",
        mensaje="El balance no cuadra.",
        detalles={
            "total_activos": total_activos,
            "total_pasivos_y_patrimonio": total_pasivos_y_patrimonio,
            "diferencia": diferencia,
        },
    )


def _revisar_verificaciones(metricas: MetricasFinancieras) -> list[ProblemaLogico]:
    problemas: list[ProblemaLogico] = []

    for verificacion in metricas.verificaciones:
        descuadre = verificacion.suma
        if abs(descuadre) <= TOLERANCIA_VERIFICACION:
            continue

        problemas.append(
            ProblemaLogico(
                tipo="Voucher",
                severidad="error",
                mensaje=f"La verificación '{verificacion.id}' no cuadra.",
                detalles={
                    "id_verificacion": verificacion.id,
                    "descripcion": verificacion.descripcion,
                    "descuadre": descuadre,
                    "num_transacciones": verificacion.num_transacciones,
                },
            )
        )

    return problemas
