"""
Console and CSV output for a validation report.
"""

import pandas as pd

from .validator import ValidationReport

REPORT_COLUMNS = ["product_id", "product_name", "length", "filtered_length"]


def print_report(report: ValidationReport, field_name="l_description"):
    print("\n==============================")
    print(f"Records over {report.max_length} characters in '{field_name}':")
    for key in report.keys:
        print(key)
    print(f"Count: {len(report)}")
    print("==============================\n")


def report_frame(report: ValidationReport) -> pd.DataFrame:
    return pd.DataFrame([r.to_dict() for r in report.oversized], columns=REPORT_COLUMNS)


def export_report_csv(report: ValidationReport, path):
    df = report_frame(report)
    df.to_csv(path, index=False, encoding="utf-8")
    return len(df)
