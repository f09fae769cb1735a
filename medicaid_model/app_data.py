"""
Application data for the Medicaid Reform Dashboard.

Contains:
- PRESET_SCENARIOS: Named lever bundles applied on top of the selected state
- DASHBOARD_NOTES: Usage notes and the demo-data disclaimer
"""

# =============================================================================
# PRESET SCENARIOS - partial flat records (see Scenario.to_record)
# Keys not listed take their baseline value. Illustrative only.
# =============================================================================
PRESET_SCENARIOS = {
    "Baseline (No Action)": {
        "description": "Absorb the full federal funding loss with no policy response.",
        "levers": {},
    },
    "Eligibility Tightening": {
        "description": "Lower adult and parent eligibility to 100% FPL; protect children, elderly and disabled.",
        "levers": {
            "eligibility_parents": 100,
            "eligibility_adults": 100,
        },
    },
    "Work Requirements + Exemptions": {
        "description": "80 hours/month work requirement with standard exemptions, students included.",
        "levers": {
            "work_enabled": True,
            "work_hours_per_week": 20,
            "exempt_students": True,
        },
    },
    "Revenue-Balanced Package": {
        "description": "Close the gap mainly with new revenue: income, property and sin tax increases.",
        "levers": {
            "income_tax_increase": 2.0,
            "property_tax_increase": 1.5,
            "sin_tax_increase": 50,
        },
    },
    "Cost Shift with SNAP Sharing": {
        "description": "Work requirements and adult eligibility cuts while the state picks up 15% of SNAP.",
        "levers": {
            "eligibility_adults": 100,
            "work_enabled": True,
            "work_hours_per_week": 30,
            "snap_enabled": True,
            "snap_share_percent": 15,
        },
    },
}

# =============================================================================
# DASHBOARD TEXT
# =============================================================================
DASHBOARD_NOTES = {
    "how_to_use": [
        "Select your state to see projected federal funding losses",
        "Adjust policy levers to model different reform scenarios",
        "Monitor the budget impact in real-time as you make changes",
        "Review visualizations to understand enrollment and fiscal impacts",
        "Export your scenario for further analysis or presentation",
    ],
    "disclaimer": (
        "DEMO ONLY: state figures and model coefficients are illustrative "
        "placeholders, not validated fiscal estimates."
    ),
    "double_counting": (
        "People affected adds the eligibility and work requirement counts without "
        "removing people affected by both, so it can overstate the total."
    ),
}
