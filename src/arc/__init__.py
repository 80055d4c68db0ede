"""arc - personal task and note tracker."""
