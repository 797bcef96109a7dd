"""Mobile step definitions shared by Android and iOS."""
