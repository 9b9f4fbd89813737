from docsorter.classification.base import BaseClassifier
from docsorter.classification.classifier import Classifier
from docsorter.classification.factory import ClassifierFactory
from docsorter.classification.models import ClassificationResult

__all__ = ["BaseClassifier", "ClassificationResult", "Classifier", "ClassifierFactory"]
