"""Redux Toolkit store: generic API thunk, one slice per model, store setup"""

from core.models import GeneratedFile, ModelConfig
from utils.naming import camel_case, pascal_case, plural_route_segment
from .base import ModelArtifactRenderer, dedent_block
from .forms import schema_path


API_THUNK = dedent_block("""
import { createAsyncThunk } from "@reduxjs/toolkit";
import type { AxiosResponse } from "axios";

/**
 * Wrap an axios call in createAsyncThunk; the response body becomes the payload
 * and failures are passed to rejectWithValue.
 *
 * @example
 * export const fetchUsers = createApiThunk<User[], void>("users/fetchAll", () => api.get("/users"));
 */
export const createApiThunk = <Returned, ThunkArg>(
  typePrefix: string,
  apiCall: (arg: ThunkArg) => Promise<AxiosResponse<Returned>>,
) =>
  createAsyncThunk<Returned, ThunkArg>(typePrefix, async (arg, { rejectWithValue }) => {
    try {
      const response = await apiCall(arg);
      return response.data;
    } catch (error: any) {
      return rejectWithValue(error?.response?.data ?? error?.message ?? error);
    }
  });
""")


def slice_key(model: ModelConfig) -> str:
    """State key and slice name for a model, e.g. ``users``"""
    return f"{camel_case(model.name)}s"


def slice_path(model: ModelConfig) -> str:
    return f"src/store/slices/{camel_case(model.name)}Slice.ts"


class ReduxStoreRenderer(ModelArtifactRenderer):
    """
    Redux Toolkit state for the generated CRUD pages.

    Every model gets a slice with fetch/create/update/remove thunks built
    from ``createApiThunk``; ``src/store/index.ts`` combines the slice
    reducers and exports ``RootState`` and ``AppDispatch``.
    """

    @property
    def name(self) -> str:
        return "redux_store"

    def render(self, models):
        files = [GeneratedFile(path="src/store/thunks/apiThunk.ts", content=API_THUNK)]
        files.extend(super().render(models))
        files.append(GeneratedFile(path="src/store/index.ts", content=self._store(models)))
        return files

    def render_model(self, model, models):
        pascal = pascal_case(model.name)
        key = slice_key(model)
        endpoint = plural_route_segment(model.name)
        schema_import = schema_path(model)[len("src/"):-len(".ts")]
        record = f"{pascal}Record"

        content = dedent_block(f"""
import {{ createSlice, createSelector }} from "@reduxjs/toolkit";
import api from "@/lib/api";
import {{ type {pascal}FormValues }} from "@/{schema_import}";
import {{ createApiThunk }} from "../thunks/apiThunk";
import type {{ RootState }} from "../index";

export type {record} = {pascal}FormValues & {{ id: string | number }};

interface {pascal}State {{
  items: {record}[];
  status: "idle" | "loading" | "succeeded" | "failed";
  error: unknown;
}}

const initialState: {pascal}State = {{
  items: [],
  status: "idle",
  error: null,
}};

export const fetch{pascal}s = createApiThunk<{record}[], void>(
  "{key}/fetchAll",
  () => api.get("/{endpoint}"),
);

export const create{pascal} = createApiThunk<{record}, {pascal}FormValues>(
  "{key}/create",
  (values) => api.post("/{endpoint}", values),
);

export const update{pascal} = createApiThunk<{record}, {{ id: string | number; values: Partial<{pascal}FormValues> }}>(
  "{key}/update",
  ({{ id, values }}) => api.put(`/{endpoint}/${{id}}`, values),
);

export const remove{pascal} = createApiThunk<{record}, string | number>(
  "{key}/remove",
  (id) => api.delete(`/{endpoint}/${{id}}`),
);

const {key}Slice = createSlice({{
  name: "{key}",
  initialState,
  reducers: {{}},
  extraReducers: (builder) => {{
    builder
      .addCase(fetch{pascal}s.pending, (state) => {{
        state.status = "loading";
      }})
      .addCase(fetch{pascal}s.fulfilled, (state, action) => {{
        state.status = "succeeded";
        state.items = action.payload;
      }})
      .addCase(fetch{pascal}s.rejected, (state, action) => {{
        state.status = "failed";
        state.error = action.payload;
      }})
      .addCase(create{pascal}.fulfilled, (state, action) => {{
        state.items.push(action.payload);
      }})
      .addCase(update{pascal}.fulfilled, (state, action) => {{
        const index = state.items.findIndex((item) => item.id === action.payload.id);
        if (index !== -1) state.items[index] = action.payload;
      }})
      .addCase(remove{pascal}.fulfilled, (state, action) => {{
        state.items = state.items.filter((item) => item.id !== action.meta.arg);
      }});
  }},
}});

const select{pascal}State = (state: RootState) => state.{key};

export const selectAll{pascal}s = createSelector([select{pascal}State], (s) => s.items);
export const select{pascal}Status = createSelector([select{pascal}State], (s) => s.status);
export const select{pascal}Error = createSelector([select{pascal}State], (s) => s.error);

export default {key}Slice.reducer;
""")
        return [GeneratedFile(path=slice_path(model), content=content)]

    def _store(self, models: dict[str, ModelConfig]) -> str:
        imports = "\n".join(
            f'import {slice_key(model)}Reducer from "./slices/{camel_case(model.name)}Slice";'
            for model in models.values()
        )
        reducers = "\n".join(
            f"    {slice_key(model)}: {slice_key(model)}Reducer,"
            for model in models.values()
        )
        return dedent_block(f"""
import {{ configureStore }} from "@reduxjs/toolkit";
{imports}

const store = configureStore({{
  reducer: {{
{reducers}
  }},
}});

export type RootState = ReturnType<typeof store.getState>;
export type AppDispatch = typeof store.dispatch;

export default store;
""")
