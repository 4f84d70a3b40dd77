"""Plain-text renderers for studies, submissions, filters and requirements."""