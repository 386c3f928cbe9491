"""
Export utilities for CSV and PDF generation.
"""
import csv
import io
import logging
from datetime import datetime, timezone
from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

logger = logging.getLogger(__name__)

READING_FIELDNAMES = [
    'timestamp', 'systolic', 'diastolic', 'pulse_pressure', 'mean_arterial_pressure',
    'fractional_pulse_pressure', 'fpp_category', 'bp_category',
]


def generate_readings_csv(readings):
    """Generate CSV export of blood pressure readings with derived values.

    Args:
        readings: List of BloodPressureReading objects

    Returns:
        StringIO object containing CSV data
    """
    output = io.StringIO()

    writer = csv.DictWriter(output, fieldnames=READING_FIELDNAMES)
    writer.writeheader()

    for reading in readings:
        writer.writerow({
            'timestamp': reading.timestamp.isoformat() if reading.timestamp else '',
            'systolic': reading.systolic,
            'diastolic': reading.diastolic,
            'pulse_pressure': reading.pulse_pressure,
            'mean_arterial_pressure': f'{reading.mean_arterial_pressure:.2f}',
            'fractional_pulse_pressure': f'{reading.fractional_pulse_pressure:.3f}',
            'fpp_category': reading.fpp_category.label,
            'bp_category': reading.bp_category.label,
        })

    output.seek(0)
    return output


def _summary_table(rows):
    table = Table(rows, colWidths=[2*inch, 4.5*inch])
    table.setStyle(TableStyle([
        ('FONTNAME', (0, 0), (0, -1), 'Helvetica-Bold'),
        ('ALIGN', (0, 0), (0, -1), 'RIGHT'),
        ('ALIGN', (1, 0), (1, -1), 'LEFT'),
        ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ('BOTTOMPADDING', (0, 0), (-1, -1), 5),
    ]))
    return table


def generate_report_pdf(readings, trend, fpp_summary, fpp_direction, risk_scores=None):
    """Generate a PDF summary report.

    Args:
        readings: List of BloodPressureReading objects, oldest first
        trend: TrendAnalysis for the window
        fpp_summary: FPPSummary for the window
        fpp_direction: FPPTrend comparing the older and newer halves
        risk_scores: Optional (ten_year, thirty_year) RiskResult pair

    Returns:
        BytesIO object containing PDF data
    """
    output = io.BytesIO()
    doc = SimpleDocTemplate(output, pagesize=letter, topMargin=0.5*inch, bottomMargin=0.5*inch)

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        'CustomTitle',
        parent=styles['Heading1'],
        fontSize=18,
        spaceAfter=20,
    )
    heading_style = ParagraphStyle(
        'CustomHeading',
        parent=styles['Heading2'],
        fontSize=14,
        spaceBefore=15,
        spaceAfter=10,
    )
    normal_style = styles['Normal']

    elements = []

    elements.append(Paragraph("Cardiovascular Health Report", title_style))
    generated = datetime.now(timezone.utc).strftime('%B %d, %Y at %H:%M UTC')
    elements.append(Paragraph(f"Generated: {generated}", normal_style))
    elements.append(Spacer(1, 20))

    # BP Summary
    elements.append(Paragraph("Blood Pressure Summary", heading_style))

    bp_summary = [['Total Readings:', str(len(readings))]]
    if readings:
        latest = readings[-1]
        bp_summary.append(['Latest Reading:', f"{latest.systolic}/{latest.diastolic} mmHg ({latest.bp_category.label})"])
        bp_summary.append(['Latest Date:', latest.timestamp.strftime('%B %d, %Y') if latest.timestamp else 'N/A'])
        bp_summary.append(['Latest fPP:', f"{latest.fractional_pulse_pressure:.3f} ({latest.fpp_category.label})"])
        bp_summary.append(['Interpretation:', Paragraph(latest.fpp_interpretation, normal_style)])
    if fpp_summary.count:
        bp_summary.append(['fPP Average:', f"{fpp_summary.average:.3f} (min {fpp_summary.minimum:.3f}, max {fpp_summary.maximum:.3f})"])
    else:
        bp_summary.append(['fPP Average:', 'Insufficient data'])
    bp_summary.append(['fPP Trend:', fpp_direction.label])

    elements.append(_summary_table(bp_summary))
    elements.append(Spacer(1, 15))

    # Trend
    elements.append(Paragraph("Trend", heading_style))
    interpretation = trend.interpretation
    trend_rows = [
        ['Pulse Pressure:', f"{trend.pulse_pressure_direction.symbol} {trend.pulse_pressure_direction.value}"],
        ['Mean Arterial Pressure:', f"{trend.map_direction.symbol} {trend.map_direction.value}"],
        ['Assessment:', interpretation.title],
        ['', Paragraph(interpretation.description, normal_style)],
    ]
    elements.append(_summary_table(trend_rows))
    elements.append(Spacer(1, 15))

    # Risk
    elements.append(Paragraph("Cardiovascular Risk", heading_style))
    if risk_scores:
        ten_year, thirty_year = risk_scores
        risk_rows = [
            ['10-Year Risk:', f"{ten_year.risk_percent:.1f}% ({ten_year.category.label})"],
            ['30-Year Risk:', f"{thirty_year.risk_percent:.1f}% ({thirty_year.category.label})"],
            ['', Paragraph('The 30-year estimate is an illustrative approximation.', normal_style)],
        ]
    else:
        risk_rows = [['Risk Scores:', 'Complete your profile to see risk scores']]
    elements.append(_summary_table(risk_rows))
    elements.append(Spacer(1, 15))

    # Recent Readings Table
    if readings:
        elements.append(Paragraph("Recent Readings (Last 20)", heading_style))

        reading_data = [['Date', 'BP', 'PP', 'MAP', 'fPP', 'Category']]
        for r in list(reversed(readings))[:20]:
            reading_data.append([
                r.timestamp.strftime('%m/%d/%Y %H:%M') if r.timestamp else 'N/A',
                f"{r.systolic}/{r.diastolic}",
                str(r.pulse_pressure),
                f"{r.mean_arterial_pressure:.1f}",
                f"{r.fractional_pulse_pressure:.3f}",
                r.bp_category.label,
            ])

        reading_table = Table(reading_data, colWidths=[1.5*inch, 0.9*inch, 0.6*inch, 0.8*inch, 0.8*inch, 1.6*inch])
        reading_table.setStyle(TableStyle([
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('BACKGROUND', (0, 0), (-1, 0), colors.grey),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
            ('ALIGN', (0, 0), (-1, -1), 'CENTER'),
            ('GRID', (0, 0), (-1, -1), 0.5, colors.black),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 5),
            ('TOPPADDING', (0, 0), (-1, -1), 5),
        ]))
        elements.append(reading_table)

    doc.build(elements)
    output.seek(0)
    logger.info(f"Generated report PDF for {len(readings)} reading(s)")
    return output
