"""
CSV rendering of the statistics tables.

Column headers are the ones the household has always used in its
spreadsheets, so they stay in Russian.
"""
import csv
import io

from .analytics import StatisticsQueries


# report name -> (statistics method, [(header, row key)])
CSV_REPORTS = {
    'categories': (
        StatisticsQueries.category_stats,
        [
            ('Категория', 'name'),
            ('Количество покупок', 'count'),
            ('Сумма', 'amount'),
            ('Средняя цена', 'avg_price'),
            ('Доля %', 'percentage'),
        ],
    ),
    'stores': (
        StatisticsQueries.store_stats,
        [
            ('Магазин', 'name'),
            ('Адрес', 'address'),
            ('Количество покупок', 'count'),
            ('Посещений', 'visits_count'),
            ('Сумма', 'amount'),
            ('Средний чек', 'avg_receipt'),
        ],
    ),
    'monthly': (
        StatisticsQueries.monthly_stats,
        [
            ('Месяц', 'name'),
            ('Количество покупок', 'count'),
            ('Сумма', 'amount'),
            ('Категорий', 'categories_count'),
            ('Магазинов', 'stores_count'),
        ],
    ),
}


def render_csv_report(report, purchases):
    """
    Render one statistics table as CSV text.

    Args:
        report (str): One of CSV_REPORTS.
        purchases (QuerySet): Purchases to aggregate.

    Returns:
        str: CSV with a header row.

    Raises:
        KeyError: If the report name is unknown.
    """
    stats_method, columns = CSV_REPORTS[report]
    headers = [header for header, _ in columns]

    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=headers)
    writer.writeheader()
    for item in stats_method(purchases):
        writer.writerow({header: item[key] for header, key in columns})

    return buf.getvalue()
