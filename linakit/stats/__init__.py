"""Descriptive statistics, regression and component analysis."""