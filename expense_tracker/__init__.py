"""Interactive console shell for the daily expense tracker."""
