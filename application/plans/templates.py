r"""
Static file templates written by the built-in plans.

Placeholders: ${project.*} and ${env.*}. A literal ${ in JavaScript is
written as \${; GitHub Actions expressions (${{ ... }}) are left alone.
"""

CI_WORKFLOW = r"""name: CI

on:
  push:
    branches: [main]
  pull_request:
    branches: [main]

jobs:
  build:
    runs-on: ubuntu-latest

    strategy:
      matrix:
        node-version: [${project.node_version}.x]

    steps:
      - uses: actions/checkout@v4
      - name: Use Node.js ${{ matrix.node-version }}
        uses: actions/setup-node@v4
        with:
          node-version: ${{ matrix.node-version }}
          cache: npm
      - run: npm ci
      - run: npm run lint --if-present
      - run: npm test --if-present
      - run: npm run build
"""

DOCKERFILE = r"""FROM node:${project.node_version}-alpine AS deps
WORKDIR /app
COPY package.json package-lock.json* ./
RUN npm ci

FROM node:${project.node_version}-alpine AS builder
WORKDIR /app
COPY --from=deps /app/node_modules ./node_modules
COPY . .
RUN npm run build

FROM node:${project.node_version}-alpine AS runner
WORKDIR /app
ENV NODE_ENV=production
COPY --from=builder /app/public ./public
COPY --from=builder /app/.next ./.next
COPY --from=builder /app/node_modules ./node_modules
COPY --from=builder /app/package.json ./package.json

EXPOSE 3000
CMD ["npm", "start"]
"""

README = r"""# ${project.name}

A [Next.js](https://nextjs.org/) front-end project.

## Requirements

- Node.js ${project.min_node_version} or newer
- npm
- Docker (optional, for container builds)

## Getting started

```bash
npm install
npm run dev
```

Open [http://localhost:3000](http://localhost:3000) in your browser.

## Configuration

Local settings live in `.env.local`:

| Key | Value |
| --- | --- |
| `NEXT_PUBLIC_API_URL` | `${env.NEXT_PUBLIC_API_URL}` |
| `NEXT_PUBLIC_SITE_NAME` | `${env.NEXT_PUBLIC_SITE_NAME}` |

## Scripts

- `npm run dev` - start the development server
- `npm run build` - build for production
- `npm test` - run the test suite

## Docker

```bash
docker build -t ${project.name} .
docker run -p 3000:3000 ${project.name}
```
"""

GITIGNORE = r"""node_modules/
.next/
out/
build/
coverage/

.env*.local
bootstrap.log

npm-debug.log*
.DS_Store
"""

RTK_API = r"""import { createApi, fetchBaseQuery } from '@reduxjs/toolkit/query/react';

const api = createApi({
  reducerPath: 'api',
  baseQuery: fetchBaseQuery({ baseUrl: '/api' }), // Replace with your API base URL
  endpoints: (builder) => ({
    getPosts: builder.query({
      query: () => 'posts',
    }),
    getPostById: builder.query({
      query: (postId) => `posts/\${postId}`,
    }),
    addPost: builder.mutation({
      query: (newPost) => ({
        url: 'posts',
        method: 'POST',
        body: newPost,
      }),
    }),
    updatePost: builder.mutation({
      query: ({ postId, updatedPost }) => ({
        url: `posts/\${postId}`,
        method: 'PUT',
        body: updatedPost,
      }),
    }),
    deletePost: builder.mutation({
      query: (postId) => ({
        url: `posts/\${postId}`,
        method: 'DELETE',
      }),
    }),
  }),
});

export const {
  useGetPostsQuery,
  useGetPostByIdQuery,
  useAddPostMutation,
  useUpdatePostMutation,
  useDeletePostMutation,
} = api;

export default api;
"""

RTK_STORE = r"""import { configureStore } from '@reduxjs/toolkit';
import api from './api';

const store = configureStore({
  reducer: {
    [api.reducerPath]: api.reducer,
  },
  middleware: (getDefaultMiddleware) =>
    getDefaultMiddleware().concat(api.middleware),
});

export default store;
"""

RTK_APP = r"""import { Provider } from 'react-redux';
import store from '../src/app/store';

function MyApp({ Component, pageProps }) {
  return (
    <Provider store={store}>
      <Component {...pageProps} />
    </Provider>
  );
}

export default MyApp;
"""

RTK_POSTS_INDEX = r"""import Link from 'next/link';
import { useGetPostsQuery, useDeletePostMutation } from '../../src/app/api';

function PostsList() {
  const { data: posts, error, isLoading, refetch } = useGetPostsQuery();
  const [deletePost, { isLoading: isDeleting }] = useDeletePostMutation();

  const handleDelete = async (postId) => {
    try {
      await deletePost(postId);
      refetch();
    } catch (error) {
      console.error('Failed to delete the post:', error.message);
    }
  };

  if (isLoading) return <div>Loading...</div>;
  if (error) return <div>Error: {error.message}</div>;

  return (
    <div>
      <h1>Posts List</h1>
      <Link href="/posts/new">Add New Post</Link>
      <ul>
        {posts.map((post) => (
          <li key={post.id}>
            <Link href={`/posts/\${post.id}`}>{post.title}</Link>
            <button onClick={() => handleDelete(post.id)} disabled={isDeleting}>
              Delete
            </button>
          </li>
        ))}
      </ul>
    </div>
  );
}

export default PostsList;
"""

RTK_POST_EDIT = r"""import { useRouter } from 'next/router';
import { useEffect, useState } from 'react';
import { useGetPostByIdQuery, useUpdatePostMutation } from '../../src/app/api';

function EditPost() {
  const router = useRouter();
  const { postId } = router.query;
  const { data: post, error, isLoading } = useGetPostByIdQuery(postId, { skip: !postId });
  const [updatedPost, setUpdatedPost] = useState({ title: '', body: '' });
  const [updatePost, { isLoading: isUpdating }] = useUpdatePostMutation();

  useEffect(() => {
    if (post) setUpdatedPost(post);
  }, [post]);

  const handleChange = (e) => {
    setUpdatedPost({ ...updatedPost, [e.target.name]: e.target.value });
  };

  const handleSubmit = async (e) => {
    e.preventDefault();
    try {
      await updatePost({ postId, updatedPost });
      router.push('/posts');
    } catch (error) {
      console.error('Failed to update the post:', error.message);
    }
  };

  if (isLoading) return <div>Loading...</div>;
  if (error) return <div>Error: {error.message}</div>;

  return (
    <div>
      <h1>Edit Post</h1>
      <form onSubmit={handleSubmit}>
        <input
          type="text"
          name="title"
          value={updatedPost.title}
          onChange={handleChange}
          required
        />
        <textarea
          name="body"
          value={updatedPost.body}
          onChange={handleChange}
          required
        />
        <button type="submit" disabled={isUpdating}>
          Update Post
        </button>
      </form>
    </div>
  );
}

export default EditPost;
"""
