"""
PDF export for lot-sizing decision reports.
"""

from __future__ import annotations

from datetime import datetime
from io import BytesIO

import numpy as np
import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from src.config import PROFILE_ROWS_IN_REPORT
from src.decision_support import format_cost
from src.preprocess import LotSizingRequest

_TABLE_STYLE = TableStyle(
    [
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#8c1118")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("GRID", (0, 0), (-1, -1), 0.4, colors.HexColor("#cccccc")),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
        ("ALIGN", (0, 0), (0, -1), "LEFT"),
        ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#f8f8f8")]),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("TOPPADDING", (0, 0), (-1, -1), 4),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
    ]
)


def _demand_preview(demand: tuple[float, ...], max_items: int = 12) -> str:
    shown = ", ".join(f"{d:g}" for d in demand[:max_items])
    if len(demand) > max_items:
        shown += f", ... ({len(demand)} periodos)"
    return shown or "-"


def build_lot_sizing_pdf(
    request: LotSizingRequest,
    comparison_df: pd.DataFrame,
    profile: np.ndarray,
) -> bytes:
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        topMargin=1.8 * cm,
        bottomMargin=1.6 * cm,
        leftMargin=1.8 * cm,
        rightMargin=1.8 * cm,
    )

    styles = getSampleStyleSheet()
    styles.add(
        ParagraphStyle(
            name="TitleDecision",
            parent=styles["Title"],
            fontSize=18,
            leading=22,
            textColor=colors.HexColor("#8c1118"),
        )
    )
    styles.add(
        ParagraphStyle(
            name="Subtle",
            parent=styles["BodyText"],
            fontSize=9,
            textColor=colors.HexColor("#666666"),
        )
    )

    elements = []
    elements.append(Paragraph("Relatorio de Decisao - Dimensionamento de Lotes", styles["TitleDecision"]))
    elements.append(Paragraph(f"Gerado em {datetime.now().strftime('%d/%m/%Y %H:%M')}", styles["Subtle"]))
    elements.append(Spacer(1, 0.45 * cm))

    elements.append(Paragraph("<b>Parametros</b>", styles["Heading3"]))
    parameter_lines = [
        f"Horizonte: {request.horizon} periodos",
        f"Demanda: {_demand_preview(request.demand)}",
        f"Custo de manutencao (h): {format_cost(request.holding_cost)} por unidade/periodo",
        f"Custo por pedido (K): {format_cost(request.order_cost)}",
    ]
    for line in parameter_lines:
        elements.append(Paragraph(f"- {line}", styles["BodyText"]))
    elements.append(Spacer(1, 0.35 * cm))

    elements.append(Paragraph("<b>Resultado</b>", styles["Heading3"]))
    elements.append(
        Paragraph(f"Custo minimo total: <b>{format_cost(float(profile[0]))}</b>", styles["BodyText"])
    )
    elements.append(Spacer(1, 0.35 * cm))

    elements.append(Paragraph("<b>Comparacao de Estrategias</b>", styles["Heading3"]))
    strategy_rows = [["Estrategia", "Custo Total", "Economia vs Lote a Lote"]]
    for _, row in comparison_df.iterrows():
        strategy_rows.append([
            str(row["Estrategia"]),
            format_cost(float(row["Custo Total"])),
            f"{float(row['Economia vs Lote a Lote (%)']):.1f}%",
        ])
    strategy_table = Table(strategy_rows, colWidths=[8.0 * cm, 3.5 * cm, 4.5 * cm], repeatRows=1)
    strategy_table.setStyle(_TABLE_STYLE)
    elements.append(strategy_table)
    elements.append(Spacer(1, 0.35 * cm))

    elements.append(Paragraph("<b>Custo Restante por Periodo Inicial</b>", styles["Heading3"]))
    profile_rows = [["Periodo", "Demanda", "Custo Restante"]]
    for period in range(min(request.horizon, PROFILE_ROWS_IN_REPORT)):
        profile_rows.append([
            str(period + 1),
            f"{request.demand[period]:g}",
            format_cost(float(profile[period])),
        ])
    profile_table = Table(profile_rows, colWidths=[3.0 * cm, 4.0 * cm, 4.5 * cm], repeatRows=1)
    profile_table.setStyle(_TABLE_STYLE)
    elements.append(profile_table)
    elements.append(Spacer(1, 0.35 * cm))
    elements.append(
        Paragraph(
            "Observacao: o custo de manutencao considera o lote inteiro mantido durante todos "
            "os periodos que ele cobre.",
            styles["Subtle"],
        )
    )

    doc.build(elements)
    return buffer.getvalue()
