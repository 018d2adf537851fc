"""
Body measurement metric catalogue.

Every metric is a nullable numeric column of
:class:`~app.models.measurement.MeasurementEntry`.  The catalogue order
is the order used in report tables.
"""

METRIC_LABELS: dict[str, str] = {
    "weight": "Weight (kg)",
    "bmi": "BMI",
    "fat_percentage": "Body fat (%)",
    "muscle_mass": "Muscle mass (kg)",
    "bmr": "BMR (kcal)",
    "metabolic_age": "Metabolic age",
    "visceral_fat": "Visceral fat",
    "body_water_percentage": "Body water (%)",
    "physique_rating": "Physique rating",
    "chest_circumference": "Chest (cm)",
    "waist_circumference": "Waist (cm)",
    "glutes_circumference": "Glutes (cm)",
}

METRIC_NAMES = list(METRIC_LABELS)

# Metrics drawn together on one multi-axis chart in reports.
OVERVIEW_METRICS = ["weight", "bmi", "metabolic_age"]
BODY_COMPOSITION_METRICS = ["fat_percentage", "visceral_fat"]


def metric_label(metric: str) -> str:
    """Display label for *metric*, falling back to the key itself."""
    return METRIC_LABELS.get(metric, metric)
