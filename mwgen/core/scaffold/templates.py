"""Go templates for the CRUD scaffold."""

from jinja2 import Template

MODEL_TEMPLATE = Template(
    """package {{ package }}

// {{ model }} is the entity managed by Service.
type {{ model }} struct {
	ID uint
}
""",
    keep_trailing_newline=True,
)

REPOSITORY_TEMPLATE = Template(
    """package {{ package }}

import (
	"context"
)

// Repository persists {{ model }} entities.
type Repository interface {
	Insert(ctx context.Context, {{ var }} *{{ model }}) error
	Find(ctx context.Context, id uint) (*{{ model }}, error)
	Update(ctx context.Context, {{ var }} *{{ model }}) error
	Delete(ctx context.Context, id uint) error
}
""",
    keep_trailing_newline=True,
)

SERVICE_TEMPLATE = Template(
    """package {{ package }}

// Code generated by mwgen-scaffold; adapt the service to your business logic.

import (
	"context"

	"github.com/pkg/errors"
)

type Service interface {
	Add(ctx context.Context, {{ var }} *{{ model }}) error
	Get(ctx context.Context, id uint) (*{{ model }}, error)
	Edit(ctx context.Context, {{ var }} *{{ model }}) error
	Remove(ctx context.Context, id uint) error
}

type service struct {
	repo Repository
}

func NewService(repo Repository) Service {
	return &service{repo: repo}
}

func (s *service) Add(ctx context.Context, {{ var }} *{{ model }}) error {
	if err := s.repo.Insert(ctx, {{ var }}); err != nil {
		return errors.Wrap(err, "repository insert")
	}

	return nil
}

func (s *service) Get(ctx context.Context, id uint) (*{{ model }}, error) {
	res, err := s.repo.Find(ctx, id)
	if err != nil {
		return nil, errors.Wrap(err, "repository find")
	}

	return res, nil
}

func (s *service) Edit(ctx context.Context, {{ var }} *{{ model }}) error {
	if _, err := s.repo.Find(ctx, {{ var }}.ID); err != nil {
		return errors.Wrap(err, "repository find")
	}

	if err := s.repo.Update(ctx, {{ var }}); err != nil {
		return errors.Wrap(err, "repository update")
	}

	return nil
}

func (s *service) Remove(ctx context.Context, id uint) error {
	if _, err := s.repo.Find(ctx, id); err != nil {
		return errors.Wrap(err, "repository find")
	}

	if err := s.repo.Delete(ctx, id); err != nil {
		return errors.Wrap(err, "repository delete")
	}

	return nil
}
""",
    keep_trailing_newline=True,
)

# File name -> template, in write order
SCAFFOLD_FILES = {
    "model.go": MODEL_TEMPLATE,
    "repository.go": REPOSITORY_TEMPLATE,
    "service.go": SERVICE_TEMPLATE,
}
